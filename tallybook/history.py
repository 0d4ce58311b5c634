'''Timestamped action histories.

An :class:`ActionHistory` is an append-only log of plain text entries, each
prefixed by the time it was recorded. Candidates and constituencies each own
one and expose its contents through their ``action_history()`` method.
'''

import datetime
import logging
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT: str = '%d/%m/%Y %H:%M:%S'
'''Format of entry timestamps (day/month/year hours:minutes:seconds).'''

Clock = Callable[[], datetime.datetime]


class ActionHistory:
    '''An append-only log of timestamped actions.

    :param clock: A function returning the current time, used to stamp
        the recorded entries. Defaults to the local wall clock.
    '''
    def __init__(self, clock: Optional[Clock] = None):
        self._clock = datetime.datetime.now if clock is None else clock
        self._entries: List[str] = []

    def record(self, description: str) -> str:
        '''Append an action to the history.

        :param description: Description of the action.
        :returns: The recorded entry, including its timestamp.
        :raises ValueError: If the description is empty.
        '''
        if not description:
            raise ValueError('action description must not be empty')
        entry = self._clock().strftime(TIMESTAMP_FORMAT) + ' - ' + description
        self._entries.append(entry)
        logger.debug('recorded action: %s', entry)
        return entry

    def entries(self) -> List[str]:
        '''Return all recorded entries, oldest first.

        The returned list is a copy; modifying it does not affect the history.
        '''
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f'<ActionHistory({len(self._entries)} entries)>'
