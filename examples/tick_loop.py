"""Example: drive a morph with a simple scheduler queue, like an animation frame loop."""

import time
from collections import deque

from pathmorph import Morpher, RecordingHost

WAVE = "M0 10 Q5 0 10 10 T20 10"
FLAT = "M0 10 L10 10 L20 10"


def main() -> None:
    pending = deque()
    host = RecordingHost(WAVE)
    morpher = Morpher(host, [FLAT], scheduler=pending.append, duration=300, iterations=0)
    morpher.play()
    while pending:
        time.sleep(1 / 60)
        pending.popleft()()
    print(f"{len(host.history)} frame(s) written, final: {host.d}")


if __name__ == "__main__":
    main()
