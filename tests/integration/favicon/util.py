# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""Helpers shared by the favicon pipeline integration tests."""


class SlowResponse:
    """Route marker: answer 200 only after `delay` seconds."""

    def __init__(self, delay: float) -> None:
        self.delay = delay
