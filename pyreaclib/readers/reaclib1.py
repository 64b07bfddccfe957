#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
REACLIB 1 reader (chapter headers shared by many sets)

File Format Assumptions
-----------------------
* The file is a sequence of three-line groups.
* A group whose second and third lines are blank is a chapter header; its
  first line holds the chapter code (1-11).  All following sets belong
  to that chapter until the next header.
* Any other group is a set, decoded with the active chapter.

The format never marks headers explicitly, so a group is *first* tried as
a header and only then as a set.  A set seen before any header is an
error because the nuclide columns cannot be split into reactants and
products without a chapter.

References
----------
.. [1] JINA REACLIB format help,
   https://reaclib.jinaweb.org/help.php?topic=reaclib_format
"""

from __future__ import annotations

import logging

from pyreaclib.exceptions import ChapterUnsetError
from pyreaclib.models.records import Chapter, ReaclibSet
from pyreaclib.readers.base import BaseReader, LineSource, decode_set
from pyreaclib.utils.parsing import is_blank

logger = logging.getLogger(__name__)


class Reaclib1Reader(BaseReader):
    """Streaming reader for REACLIB 1 files

    The reader is in one of two states: no chapter (``chapter is None``)
    or inside a chapter.  Only a successfully parsed header changes the
    state; a header with a bad chapter code raises and leaves the
    previous chapter active.

    Examples
    --------
    >>> with open("reaclib1", "rb") as fh:
    ...     sets = list(Reaclib1Reader(fh))
    """

    group_size = 3

    def __init__(self, source: LineSource) -> None:
        super().__init__(source)
        self.chapter: Chapter | None = None

    def _next_set(self) -> ReaclibSet:
        while True:
            lines = self._read_group()
            if lines is None:
                raise StopIteration

            if is_blank(lines[1]) and is_blank(lines[2]):
                self.chapter = Chapter.from_text(lines[0])
                logger.debug(
                    "Chapter %d at line %d (%d reactants, %d products)",
                    self.chapter.value,
                    self.lines_read - 2,
                    self.chapter.num_reactants,
                    self.chapter.num_products,
                )
                continue

            if self.chapter is None:
                raise ChapterUnsetError()
            return decode_set(self.chapter, lines)
