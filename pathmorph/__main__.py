import argparse
import logging
import sys
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import List, Optional, Sequence

from pathmorph import EASING_FUNCTIONS, Morpher, build_config, get_profile
from pathmorph.config import PROFILES
from pathmorph.validate import ValidationError

logger = logging.getLogger(__name__)

SVG_NS = 'http://www.w3.org/2000/svg'


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def read_keyframes(text: str) -> List[str]:
    """One path description per line; blank lines and ``#`` comments are skipped."""
    keyframes = []
    for line in text.splitlines():
        line = line.split('#', 1)[0].strip()
        if line:
            keyframes.append(line)
    return keyframes


def build_svg(first: str, frames: Sequence[str], *, duration_ms: float, repeat: str) -> ET.ElementTree:
    ET.register_namespace('', SVG_NS)
    root = ET.Element(f'{{{SVG_NS}}}svg')
    path = ET.SubElement(root, f'{{{SVG_NS}}}path', {'d': first})
    ET.SubElement(
        path,
        f'{{{SVG_NS}}}animate',
        {
            'attributeName': 'd',
            'dur': f'{duration_ms:g}ms',
            'repeatCount': repeat,
            'values': ';'.join(frames),
        },
    )
    return ET.ElementTree(root)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Sample the frames of an SVG path morph")
    parser.add_argument("path", help="File with one path description per line")
    parser.add_argument("--log-level", default="INFO", help="Logging level (default: INFO)")
    parser.add_argument(
        "--profile",
        choices=sorted(PROFILES),
        default="default",
        help="Base playback profile (default: default)",
    )
    parser.add_argument("--duration", type=float, help="Iteration length in milliseconds")
    parser.add_argument("--iterations", type=int, help="Last iteration index, -1 for endless")
    parser.add_argument("--alternate", action="store_true", help="Play every other iteration backwards")
    parser.add_argument("--easing", choices=sorted(EASING_FUNCTIONS), help="Easing curve")
    parser.add_argument("--precision", type=int, help="Decimal places in output")
    parser.add_argument("--fps", type=float, default=30.0, help="Sampling rate (default: 30)")
    parser.add_argument("--output", help="Write one frame per line to the given path")
    parser.add_argument("--svg-output", help="Write an SVG animating the sampled frames")
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    keyframes = read_keyframes(Path(args.path).read_text(encoding="utf-8"))
    if len(keyframes) < 2:
        logger.error("Need at least two keyframes, found %d", len(keyframes))
        raise SystemExit(1)

    options = {
        key: value
        for key, value in (
            ("duration", args.duration),
            ("iterations", args.iterations),
            ("easing", args.easing),
            ("precision", args.precision),
        )
        if value is not None
    }
    if args.alternate:
        options["alternate"] = True
    config = build_config(options, base=get_profile(args.profile))

    element = ET.Element('path', {'d': keyframes[0]})
    try:
        morpher = Morpher(element, keyframes[1:], config)
    except ValidationError as exc:
        logger.error("Invalid keyframes: %s", exc)
        raise SystemExit(1)

    logger.info(
        "Morphing %d keyframe(s): duration=%sms iterations=%s alternate=%s",
        len(morpher.steps),
        config.duration,
        config.iterations,
        config.alternate,
    )
    sampled = list(morpher.frames(args.fps))
    logger.info("Sampled %d frame(s) at %s fps", len(sampled), args.fps)

    lines = [f"{timestamp:.1f}\t{d}" for timestamp, d in sampled]
    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        logger.info("Frames written to %s", output_path)
    else:
        for line in lines:
            print(line)

    if args.svg_output:
        svg_path = Path(args.svg_output)
        svg_path.parent.mkdir(parents=True, exist_ok=True)
        total = sampled[-1][0] if sampled else 0.0
        repeat = "indefinite" if config.iterations < 0 else "1"
        tree = build_svg(keyframes[0], [d for _, d in sampled], duration_ms=total, repeat=repeat)
        tree.write(svg_path, encoding="unicode")
        logger.info("SVG written to %s", svg_path)


if __name__ == "__main__":
    main(sys.argv[1:])
