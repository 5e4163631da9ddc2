"""Example: morph a square into a diamond and back, printing sampled frames."""

from pathmorph import Morpher, RecordingHost

SQUARE = "M0 0 L10 0 L10 10 L0 10 Z"
DIAMOND = "M5 -2 L12 5 L5 12 L-2 5 Z"


def main() -> None:
    host = RecordingHost(SQUARE)
    morpher = Morpher(host, [DIAMOND], duration=400, iterations=1, alternate=True)
    for timestamp, d in morpher.frames(fps=10):
        print(f"{timestamp:6.1f}ms  {d}")


if __name__ == "__main__":
    main()
