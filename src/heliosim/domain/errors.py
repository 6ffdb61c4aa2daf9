# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Error taxonomy for the model layer.

Both errors subclass ValueError so callers that already guard against bad
arguments keep working. Collapsed geometry (e.g. an absent bow shock) is
a valid result and has no error type.
"""


class InvalidBodyError(ValueError):
    """Raised when a body or spacecraft is not present in the static tables."""

    def __init__(self, name: str, known: tuple[str, ...] = ()) -> None:
        self.name = name
        self.known = known
        msg = f"Unknown body '{name}'"
        if known:
            msg += f"; expected one of: {', '.join(known)}"
        super().__init__(msg)


class OutOfRangeDateError(ValueError):
    """Raised when a spacecraft trajectory is queried before launch."""

    def __init__(self, name: str, jd: float, launch_jd: float) -> None:
        self.name = name
        self.jd = jd
        self.launch_jd = launch_jd
        super().__init__(
            f"JD {jd:.3f} is before the launch of {name} (JD {launch_jd:.3f})"
        )
