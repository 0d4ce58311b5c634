"""A demonstration of a single-constituency election.

Registers three independent candidates in the Picsouville constituency,
records their votes, closes the election and shows the results along with
the action histories of all participants.
"""

import argparse
import logging
import sys
from typing import List, Optional

from tallybook.candidate import Candidate
from tallybook.constituency import Constituency

argparser = argparse.ArgumentParser(
    prog='tallybook',
    description=__doc__,
    formatter_class=argparse.ArgumentDefaultsHelpFormatter,
)
argparser.add_argument(
    '-v', '--verbose',
    action='store_true',
    help='show all election log messages',
)
argparser.add_argument(
    '-q', '--quiet',
    action='store_true',
    help='show only error log messages',
)

SEPARATOR = '*' * 45


def main(verbose: bool = False, quiet: bool = False) -> int:
    logging.basicConfig(
        level=(
            logging.DEBUG if verbose
            else (logging.ERROR if quiet else logging.WARNING)
        ),
        format='%(levelname)-10s %(message)s'
    )
    try:
        run_demo()
    except Exception as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    return 0


def run_demo() -> None:
    """Run the Picsouville election and print its results."""
    picsouville = Constituency('Picsouville', 75)
    riri = Candidate('BALKONI', 'Riri')
    fifi = Candidate('LEMEC', 'Fifi')
    loulou = Candidate('TENERIS', 'Loulou')
    for candidate in (riri, fifi, loulou):
        picsouville.add_candidate(candidate)
    picsouville.add_votes(riri.full_name(), 12)
    picsouville.add_votes(fifi.full_name(), 5)
    picsouville.add_votes(loulou.full_name(), 37)
    picsouville.close()

    print()
    print(SEPARATOR)
    print(picsouville)
    print(SEPARATOR)
    print()
    print(f'Turnout: {picsouville.turnout_rate()}%')
    show_winners(picsouville.find_winners())

    print()
    print('************ Action history - candidates ************')
    for i, candidate in enumerate((riri, fifi, loulou)):
        if i:
            print()
        show_history(
            f'Action history of {candidate.first_name}:',
            candidate.action_history()
        )
    print()
    print('************ Action history - constituency ************')
    show_history(None, picsouville.action_history())


def show_winners(winners: List[Candidate]) -> None:
    if not winners:
        print('Winner(s): nobody')
    else:
        print('Winner(s): ' + ', '.join(str(cand) for cand in winners))


def show_history(title: Optional[str], entries: List[str]) -> None:
    if title is not None:
        print(title)
    for entry in entries:
        print(entry)


def cli() -> None:
    args = argparser.parse_args()
    sys.exit(main(**vars(args)))


if __name__ == '__main__':
    cli()
