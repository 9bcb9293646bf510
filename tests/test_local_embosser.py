import io
import json
import os
import stat
import sys

import pytest

from textemboss.emboss import EmbosserError, new_embosser, schemes
from textemboss.local_embosser import LocalEmbosser

EXPECTED_LOCAL = """Mood-lit Libations
Champagne Powder Cocktail
Champagne served with St. Germain
elderflower liqueur and hibiscus syrup
Mile-High Manhattan
Stranahans whiskey served with
sweet vermouth
Peach Collins On The Rockies
Silver Tree vodka, Leopold Bros peach
liqueur, lemon juice and agave nectar
Colorado Craft Beer
California Wines
america"""

# The fake program echoes the image file's contents back as the text.
_ECHO_SCRIPT = """
import json, sys
args = sys.argv[1:]
if args[:2] != ["--as-json", "true"] or len(args) != 3:
    sys.exit(2)
with open(args[2], "rb") as fh:
    body = fh.read().decode("utf-8")
print(json.dumps({"text": body, "source": "fake", "created": 42}))
"""


def _write_program(directory, name, body):
    program = directory / name
    program.write_text(f"#!{sys.executable}\n{body}")
    program.chmod(program.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return program


@pytest.fixture
def echo_program(tmp_path):
    return _write_program(tmp_path, "text-emboss", _ECHO_SCRIPT)


@pytest.fixture
def menu_image(tmp_path):
    image = tmp_path / "menu.jpg"
    image.write_text(EXPECTED_LOCAL)
    return image


def test_local_embosser(echo_program, menu_image):
    em = new_embosser(f"local://{echo_program}")
    rsp = em.emboss_text(str(menu_image))
    assert str(rsp) == EXPECTED_LOCAL
    assert rsp.source == "fake"
    assert rsp.created == 42


def test_local_embosser_with_reader(echo_program, menu_image):
    em = new_embosser(f"local://{echo_program}")
    with open(menu_image, "rb") as reader:
        rsp = em.emboss_text_with_reader("", reader)
    assert str(rsp) == EXPECTED_LOCAL


def test_local_embosser_with_reader_and_path(echo_program, tmp_path):
    em = new_embosser(f"local://{echo_program}")
    target = tmp_path / "test.jpg"
    rsp = em.emboss_text_with_reader(str(target), io.BytesIO(EXPECTED_LOCAL.encode()))
    assert str(rsp) == EXPECTED_LOCAL
    assert not target.exists()


def test_local_embosser_registered_scheme(echo_program, menu_image):
    assert "local://" in schemes()
    with new_embosser(f"local://{echo_program}") as em:
        rsp = em.emboss_text(str(menu_image))
    assert rsp.to_dict() == {"text": EXPECTED_LOCAL, "source": "fake", "created": 42}


def test_missing_program_fails(tmp_path):
    with pytest.raises(EmbosserError):
        LocalEmbosser(f"local://{tmp_path / 'missing'}")


def test_failing_program_raises(tmp_path, menu_image):
    program = _write_program(tmp_path, "broken", "import sys\nsys.exit(1)\n")
    em = LocalEmbosser(f"local://{program}")
    with pytest.raises(EmbosserError):
        em.emboss_text(str(menu_image))


def test_invalid_json_raises(tmp_path, menu_image):
    program = _write_program(tmp_path, "garbled", "print('not json')\n")
    em = LocalEmbosser(f"local://{program}")
    with pytest.raises(EmbosserError):
        em.emboss_text(str(menu_image))


def test_temp_file_removed_after_failure(tmp_path):
    program = _write_program(tmp_path, "broken", "import sys\nsys.exit(1)\n")
    em = LocalEmbosser(f"local://{program}")
    target = tmp_path / "upload.jpg"
    with pytest.raises(EmbosserError):
        em.emboss_text_with_reader(str(target), io.BytesIO(b"data"))
    assert not os.path.exists(target)


def test_program_receives_expected_arguments(tmp_path, menu_image):
    body = "import json, sys\nprint(json.dumps({'text': ' '.join(sys.argv[1:3])}))\n"
    program = _write_program(tmp_path, "args", body)
    with LocalEmbosser(f"local://{program}") as em:
        rsp = em.emboss_text(str(menu_image))
    assert str(rsp) == "--as-json true"
    assert json.loads(json.dumps(rsp.to_dict()))["created"] == 0