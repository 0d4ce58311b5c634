"""Tallybook - a vote tally for single-constituency elections.

Tallybook keeps track of the votes received by the candidates standing in one
constituency and of the actions taken during the election:

-   Candidates are represented by the
    :class:`tallybook.candidate.Candidate` objects from the ``candidate``
    module. Each of them holds its own vote tally.
-   The :class:`tallybook.constituency.Constituency` object from the
    ``constituency`` module registers the candidates, records the votes cast
    for them and closes the election, after which the turnout and the winners
    are final.
-   Both candidates and constituencies keep a timestamped, append-only action
    history, provided by the ``history`` module.

Running ``python -m tallybook`` shows a demonstration election.
"""
