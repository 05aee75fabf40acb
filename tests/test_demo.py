import io

from chainhash.demo import main, run_demos


def demo_text():
    buffer = io.StringIO()
    run_demos(buffer)
    return buffer.getvalue()


def test_every_section_is_framed():
    text = demo_text()
    assert text.count("###############\n") == 20
    assert text.startswith("###############\nTest table creation\n")
    assert text.endswith("###############\n")


def test_insert_flags_reported():
    text = demo_text()
    assert "isInserted = 1\n" in text
    assert "isInserted = 0\n" in text
    assert "IsInserted: 0\n" in text


def test_collisions_reported():
    text = demo_text()
    assert "Call printCollisions():\nHash value = 2: Madrid Moscow \n" in text
    assert "Call printCollisions(1):\nBerlin Paris \n" in text
    assert "Call printCollisions(0):\nLondon Roma \n" in text


def test_hashes_reported():
    text = demo_text()
    assert "Moscow hash: 2\n" in text
    assert "London hash: 0\n" in text
    assert "Paris hash: 1\n" in text


def test_removal_sequence():
    text = demo_text()
    assert text.count("isRemoved = 1\n") == 6
    assert text.count("isRemoved = 0\n") == 4


def test_main_prints_demo(capsys):
    assert main() == 0
    assert capsys.readouterr().out == demo_text()