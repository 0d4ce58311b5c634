
import sys
import os
import datetime

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
import tallybook.candidate
from tallybook.candidate import Candidate


FIXED_TIME = datetime.datetime(2024, 3, 7, 8, 5, 9)
STAMP = '07/03/2024 08:05:09 - '


def fixed_clock():
    return FIXED_TIME


@pytest.mark.parametrize(('last_name', 'first_name', 'full_name'), [
    ('BALKONI', 'Riri', 'Riri BALKONI'),
    ('LEMEC', 'Fifi', 'Fifi LEMEC'),
    ('de la Fontaine', 'Jean', 'Jean de la Fontaine'),
])
def test_full_name(last_name, first_name, full_name):
    cand = Candidate(last_name, first_name)
    assert cand.full_name() == full_name
    cand.add_votes(10)
    assert cand.full_name() == full_name


@pytest.mark.parametrize(('last_name', 'first_name'), [
    ('', 'Riri'),
    ('BALKONI', ''),
    (None, 'Riri'),
    ('BALKONI', None),
])
def test_missing_names(last_name, first_name):
    with pytest.raises(ValueError):
        Candidate(last_name, first_name)


@pytest.mark.parametrize(('affiliation', 'expected'), [
    (None, 'Independent'),
    ('', 'Independent'),
    ('Parti des Canards', 'Parti des Canards'),
])
def test_affiliation(affiliation, expected):
    cand = Candidate('BALKONI', 'Riri', affiliation, clock=fixed_clock)
    assert cand.affiliation == expected
    assert cand.action_history() == [
        STAMP + f'Candidate created: Riri BALKONI (Affiliation: {expected})'
    ]


def test_fresh_candidate():
    cand = Candidate('TENERIS', 'Loulou')
    assert cand.vote_count() == 0
    assert not cand.votes_recorded
    assert len(cand.action_history()) == 1
    assert str(cand) == 'Loulou TENERIS (Independent) : Not recorded votes'


def test_add_votes_additive():
    cand = Candidate('TENERIS', 'Loulou', clock=fixed_clock)
    cand.add_votes(12)
    cand.add_votes(25)
    assert cand.vote_count() == 37
    assert cand.action_history()[1:] == [
        STAMP + 'Added 12 votes. Total votes: 12',
        STAMP + 'Added 25 votes. Total votes: 37',
    ]
    assert cand.describe() == 'Loulou TENERIS (Independent) : 37 votes'


def test_add_zero_votes():
    cand = Candidate('LEMEC', 'Fifi', clock=fixed_clock)
    cand.add_votes(0)
    assert cand.votes_recorded
    assert cand.vote_count() == 0
    assert str(cand) == 'Fifi LEMEC (Independent) : 0 votes'
    assert cand.action_history()[-1] == STAMP + 'Added 0 votes. Total votes: 0'


def test_add_negative_votes():
    cand = Candidate('LEMEC', 'Fifi')
    cand.add_votes(5)
    history_before = cand.action_history()
    with pytest.raises(ValueError):
        cand.add_votes(-1)
    assert cand.vote_count() == 5
    assert cand.action_history() == history_before


def test_negative_votes_keep_unrecorded():
    cand = Candidate('LEMEC', 'Fifi')
    with pytest.raises(ValueError):
        cand.add_votes(-3)
    assert not cand.votes_recorded
    assert str(cand).endswith('Not recorded votes')


def test_history_snapshot():
    cand = Candidate('BALKONI', 'Riri')
    history = cand.action_history()
    history.clear()
    assert len(cand.action_history()) == 1


def test_candidate_error_is_value_error():
    assert issubclass(tallybook.candidate.CandidateError, ValueError)


def test_repr():
    assert repr(Candidate('BALKONI', 'Riri')) == '<Candidate(Riri BALKONI)>'
