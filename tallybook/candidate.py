'''Election candidates and their vote tallies.

A :class:`Candidate` is a physical person standing in a constituency,
identified by their full name (first name followed by last name). The number
of votes they received is recorded incrementally; until the first addition,
the vote count is considered not recorded at all, which is distinct from
having received zero votes.

Every candidate keeps its own action history, independent of the history of
the constituency it is registered in.
'''

import logging
from typing import List, Optional

from tallybook.history import ActionHistory, Clock

logger = logging.getLogger(__name__)

DEFAULT_AFFILIATION: str = 'Independent'
'''Affiliation assigned to candidates standing without a party.'''


class CandidateError(ValueError):
    '''A candidate is invalid in the given context.

    E.g. a candidate with the same full name is already registered in the
    constituency, or no candidate with the requested name exists there.
    '''
    pass


class Candidate:
    '''A person standing for the election.

    :param last_name: Last name (surname) of the person.
    :param first_name: First name of the person.
    :param affiliation: A political party or movement the person stands for.
        If not given or empty, the candidate is considered an independent.
    :param clock: A function returning the current time, used to stamp
        the action history. Defaults to the local wall clock.
    :raises ValueError: If any of the names is missing or empty.
    '''
    def __init__(self,
                 last_name: str,
                 first_name: str,
                 affiliation: Optional[str] = None,
                 clock: Optional[Clock] = None,
                 ):
        if not last_name or not first_name:
            raise ValueError('candidate last name and first name are required')
        self._last_name = last_name
        self._first_name = first_name
        self._affiliation = affiliation if affiliation else DEFAULT_AFFILIATION
        self._votes: Optional[int] = None
        self._history = ActionHistory(clock)
        self._history.record(
            f'Candidate created: {self.full_name()}'
            f' (Affiliation: {self._affiliation})'
        )

    @property
    def last_name(self) -> str:
        return self._last_name

    @property
    def first_name(self) -> str:
        return self._first_name

    @property
    def affiliation(self) -> str:
        return self._affiliation

    @property
    def votes_recorded(self) -> bool:
        '''Whether any votes have been added to the candidate yet.'''
        return self._votes is not None

    def full_name(self) -> str:
        '''Return the first name followed by the last name.

        The full name identifies the candidate within a constituency.
        '''
        return self._first_name + ' ' + self._last_name

    def add_votes(self, n_votes: int) -> None:
        '''Add votes to the candidate's tally.

        Adding zero votes is allowed and marks the votes as recorded.

        :param n_votes: Number of votes to add.
        :raises ValueError: If the number of votes is negative.
        '''
        if n_votes < 0:
            raise ValueError(f'cannot add a negative number of votes: {n_votes}')
        if self._votes is None:
            self._votes = 0
        self._votes += n_votes
        logger.debug('%s now has %d votes', self.full_name(), self._votes)
        self._history.record(
            f'Added {n_votes} votes. Total votes: {self._votes}'
        )

    def vote_count(self) -> int:
        '''Return the number of votes received, zero if none were recorded.'''
        return self._votes if self._votes is not None else 0

    def action_history(self) -> List[str]:
        '''Return a copy of the candidate's action history.'''
        return self._history.entries()

    def describe(self) -> str:
        votes = self._votes if self._votes is not None else 'Not recorded'
        return f'{self.full_name()} ({self._affiliation}) : {votes} votes'

    __str__ = describe

    def __repr__(self) -> str:
        return f'<Candidate({self.full_name()})>'
