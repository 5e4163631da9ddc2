from pathmorph import Morpher, RecordingHost, match_steps, parse_step, print_step


def test_heart_to_circle_smoke():
    heart = "M10 30 C10 20 20 15 25 25 S40 20 40 30 Q40 40 25 50 T10 30 Z"
    blob = "M10 30 a15 15 0 0 1 30 0 l0 0 c0 10 -5 15 -15 20 L10 30 z"

    segment = match_steps(parse_step(heart), parse_step(blob))
    assert segment.types == ['M', 'C', 'C', 'C', 'C', 'Z']

    host = RecordingHost(heart)
    morpher = Morpher(host, [blob], duration=1000, iterations=0)
    morpher.play(0)
    morpher.tick(500)
    morpher.tick(1200)
    assert len(host.history) == 3
    assert all(d.startswith('M10 30 C') and d.endswith(' Z') for d in host.history)


def test_print_step_roundtrips_through_parser():
    text = "M1 2 h3 v4 q1 1 2 2 t3 3 z"
    step = parse_step(text)
    assert print_step(parse_step(print_step(step))) == print_step(step)
