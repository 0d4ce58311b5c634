'''Single-constituency elections.

A :class:`Constituency` registers candidates, records the votes cast for them
and, once the counting is over, closes the election. Closing is a one-way
transition: a closed constituency accepts neither new candidates nor new
votes. The turnout and the winners can be queried at any time.
'''

import logging
from typing import List, Optional

from tallybook.candidate import Candidate, CandidateError
from tallybook.history import ActionHistory, Clock

logger = logging.getLogger(__name__)


class ElectionStateError(Exception):
    '''The election is in a state that does not permit the operation.

    Raised when modifying a closed election, or when closing an election whose
    recorded votes exceed the number of registered voters.
    '''
    pass


class Constituency:
    '''An electoral district with a fixed number of registered voters.

    :param name: Name of the constituency.
    :param registered_voters: Number of voters registered on the electoral
        roll. Must be positive.
    :param clock: A function returning the current time, used to stamp
        the action history. Defaults to the local wall clock.
    :raises ValueError: If the name is empty or the number of registered
        voters is not positive.
    '''
    def __init__(self,
                 name: str,
                 registered_voters: int,
                 clock: Optional[Clock] = None,
                 ):
        if not name or registered_voters <= 0:
            raise ValueError(
                'constituency name is required and the number of registered'
                f' voters must be positive, got {name!r}, {registered_voters}'
            )
        self._name = name
        self._registered_voters = registered_voters
        self._candidates: List[Candidate] = []
        self._history = ActionHistory(clock)
        self._closed = False
        self._history.record(f'Constituency created: {self._name}')

    @property
    def name(self) -> str:
        return self._name

    @property
    def registered_voters(self) -> int:
        return self._registered_voters

    @property
    def is_closed(self) -> bool:
        '''Whether the election has been closed.'''
        return self._closed

    def candidates(self) -> List[Candidate]:
        '''Return the registered candidates in order of registration.'''
        return list(self._candidates)

    def get_candidate(self, full_name: str) -> Candidate:
        '''Return the registered candidate with the given full name.

        :param full_name: Full name of the candidate (first name followed by
            last name).
        :raises CandidateError: If no such candidate is registered.
        '''
        for candidate in self._candidates:
            if candidate.full_name() == full_name:
                return candidate
        raise CandidateError(f'Candidate {full_name} not found')

    def add_candidate(self, candidate: Candidate) -> None:
        '''Register a candidate in the constituency.

        :param candidate: Candidate to register. Their full name must not
            match any already registered candidate.
        :raises ElectionStateError: If the election is closed.
        :raises CandidateError: If a candidate with the same full name is
            already registered.
        '''
        if self._closed:
            raise ElectionStateError(
                'the election is closed, cannot add candidates'
            )
        full_name = candidate.full_name()
        if any(cand.full_name() == full_name for cand in self._candidates):
            raise CandidateError(
                f'a candidate named {full_name} already stands'
                f' in {self._name}'
            )
        self._candidates.append(candidate)
        logger.info('registered %s in %s', full_name, self._name)
        self._history.record(f'Added candidate: {full_name}')

    def add_votes(self, full_name: str, votes: int) -> None:
        '''Record votes cast for a registered candidate.

        The votes are added to the candidate's own tally (and history) and the
        addition is recorded in the constituency history as well.

        :param full_name: Full name of the candidate.
        :param votes: Number of votes to add. Must be positive.
        :raises ElectionStateError: If the election is closed.
        :raises ValueError: If the number of votes is not positive.
        :raises CandidateError: If no such candidate is registered.
        '''
        if self._closed:
            raise ElectionStateError('the election is closed, cannot add votes')
        if votes <= 0:
            raise ValueError(f'number of votes must be positive, got {votes}')
        candidate = self.get_candidate(full_name)
        candidate.add_votes(votes)
        logger.info('%d votes recorded for %s', votes, full_name)
        self._history.record(f'Added {votes} votes for {full_name}')

    def total_votes(self) -> int:
        '''Return the number of votes recorded for all candidates.'''
        return sum(cand.vote_count() for cand in self._candidates)

    def close(self) -> None:
        '''Close the election.

        The vote total is validated against the number of registered voters
        before the election is closed. Closing an already closed election
        validates again and records another closing action.

        :raises ElectionStateError: If more votes were recorded than there are
            registered voters.
        '''
        total = self.total_votes()
        if total > self._registered_voters:
            raise ElectionStateError(
                f'total votes exceed registered voters in {self._name}:'
                f' {total} > {self._registered_voters}'
            )
        self._closed = True
        logger.info('election in %s closed with %d votes', self._name, total)
        self._history.record('Election closed.')

    def turnout_rate(self) -> float:
        '''Return the recorded votes as a percentage of registered voters.'''
        return self.total_votes() / self._registered_voters * 100

    def find_winners(self) -> List[Candidate]:
        '''Return the candidates with the most votes.

        All candidates tied for the highest vote count are returned, in order
        of registration. An empty constituency has no winners.
        '''
        max_votes = max(
            (cand.vote_count() for cand in self._candidates),
            default=0
        )
        return [
            cand for cand in self._candidates
            if cand.vote_count() == max_votes
        ]

    def action_history(self) -> List[str]:
        '''Return a copy of the constituency's action history.'''
        return self._history.entries()

    def describe(self) -> str:
        lines = [f'Election in constituency {self._name}:']
        lines.extend('- ' + cand.describe() for cand in self._candidates)
        return '\n'.join(lines) + '\n'

    __str__ = describe

    def __repr__(self) -> str:
        return f'<Constituency({self._name},{self._registered_voters})>'
