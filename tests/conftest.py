import pytest

POT_HEADER = '''msgid ""
msgstr ""
"Project-Id-Version: Gutenberg\\n"
"Content-Type: text/plain; charset=UTF-8\\n"
"Content-Transfer-Encoding: 8bit\\n"

'''


@pytest.fixture
def write_pot(tmp_path):
	"""Returns a helper writing POT entries (with a header) to a temp file."""
	def write(body, header=POT_HEADER, name="messages.pot"):
		path = tmp_path / name
		path.write_text(header + body, encoding="utf-8")
		return str(path)
	return write


@pytest.fixture
def php_file(tmp_path):
	return str(tmp_path / "translations.php")
