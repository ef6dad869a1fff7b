# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Exception hierarchy for vt100ish."""


class Vt100ishError(Exception):
    """Base exception for vt100ish."""

    pass


class StreamReadError(Vt100ishError):
    """The input stream could not be read."""

    pass


class GridConfigError(Vt100ishError, ValueError):
    """Console geometry is not usable."""

    pass
