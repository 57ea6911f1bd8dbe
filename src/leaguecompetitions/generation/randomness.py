"""Seedable randomness shared by the generators.

Every generator takes an optional ``rng`` argument. When it is omitted the
module-level source is used; tests (and the random competition generator)
can reseed or replace that source with `set_default_rng`.
"""

# League Competitions
# Copyright (C) 2025  League Competitions developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import random
from typing import List, Optional, Sequence, TypeVar

T = TypeVar("T")

_default_rng = random.Random()


def get_default_rng() -> random.Random:
    """Return the module-level random source."""
    return _default_rng


def set_default_rng(rng: random.Random) -> random.Random:
    """Replace the module-level random source and return the previous one."""
    global _default_rng
    previous = _default_rng
    _default_rng = rng
    return previous


def seed_order(
    items: Sequence[T], randomize: bool, rng: Optional[random.Random] = None
) -> List[T]:
    """Return a new list of ``items``, uniformly shuffled when ``randomize``.

    The input sequence is never modified.
    """
    ordered = list(items)
    if randomize:
        (rng or _default_rng).shuffle(ordered)
    return ordered
