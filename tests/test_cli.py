import pytest

import pathmorph.__main__ as cli


def write_keyframes(tmp_path, *lines):
    path = tmp_path / "shapes.txt"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def test_read_keyframes_skips_comments_and_blank_lines():
    text = "# square to line\nM0 0 L0 0\n\nM0 0 L10 0  # end\n"
    assert cli.read_keyframes(text) == ["M0 0 L0 0", "M0 0 L10 0"]


def test_main_writes_frames(tmp_path):
    source = write_keyframes(tmp_path, "M0 0 L0 0", "M0 0 L10 0")
    out = tmp_path / "out" / "frames.txt"

    cli.main([str(source), "--easing", "linear", "--iterations", "0", "--fps", "10", "--output", str(out)])

    lines = out.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 6
    assert lines[0] == "0.0\tM0 0 L0 0"
    assert lines[-1] == "500.0\tM0 0 L10 0"


def test_main_writes_animated_svg(tmp_path, capsys):
    source = write_keyframes(tmp_path, "M0 0 L0 0", "M0 0 L10 0")
    svg = tmp_path / "morph.svg"

    cli.main([str(source), "--profile", "once", "--fps", "4", "--svg-output", str(svg)])

    printed = capsys.readouterr().out.splitlines()
    assert printed[-1].endswith("M0 0 L10 0")
    content = svg.read_text(encoding="utf-8")
    assert "<animate" in content
    assert 'attributeName="d"' in content
    assert 'repeatCount="1"' in content


def test_main_rejects_single_keyframe(tmp_path):
    source = write_keyframes(tmp_path, "M0 0 L1 1")
    with pytest.raises(SystemExit):
        cli.main([str(source)])


def test_main_rejects_mismatched_keyframes(tmp_path):
    source = write_keyframes(tmp_path, "M0 0 L1 1", "M0 0 L1 1 L2 2")
    with pytest.raises(SystemExit):
        cli.main([str(source)])
