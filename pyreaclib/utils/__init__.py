#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared utilities for parsing and validation

This sub-package centralises the fixed-width REACLIB parsing helpers, the
format constants, and the capacity checks so that no logic is duplicated
across the two reader modules.
"""

from __future__ import annotations
