#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
REACLIB 2 reader (one chapter header per set)

File Format Assumptions
-----------------------
* The file is a sequence of four-line groups.
* The first line of each group is always the chapter code (1-11); the
  remaining three lines are the set.
* No chapter is carried from one group to the next.
"""

from __future__ import annotations

import logging

from pyreaclib.models.records import Chapter, ReaclibSet
from pyreaclib.readers.base import BaseReader, decode_set

logger = logging.getLogger(__name__)


class Reaclib2Reader(BaseReader):
    """Streaming reader for REACLIB 2 files

    Examples
    --------
    >>> import io
    >>> text = io.StringIO(
    ...     "1\\n"
    ...     "         n    p                            wc12w     7.82300e-01\\n"
    ...     "-6.781610e+00 0.000000e+00 0.000000e+00 0.000000e+00\\n"
    ...     " 0.000000e+00 0.000000e+00 0.000000e+00\\n"
    ... )
    >>> next(Reaclib2Reader(text)).q_value
    0.7823
    """

    group_size = 4

    def _next_set(self) -> ReaclibSet:
        lines = self._read_group()
        if lines is None:
            raise StopIteration

        chapter = Chapter.from_text(lines[0])
        logger.debug("Set at line %d in chapter %d", self.lines_read - 3, chapter.value)
        return decode_set(chapter, lines[1:])
