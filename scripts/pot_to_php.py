#!/usr/bin/env python3
# Generates a PHP file of __() / _n_noop() stubs from a POT template so that
# PHP string extraction picks up the strings that only live in JS sources.
#
# Usage: python scripts/pot_to_php.py  (run from the project root)

import polib

DEFAULT_POT_FILE = "languages/gutenberg.pot"
DEFAULT_PHP_FILE = "languages/gutenberg-translations.php"
DEFAULT_TEXTDOMAIN = "gutenberg"

TAB = "\t"
NEWLINE = "\n"
SEPARATOR = "," + NEWLINE + NEWLINE

FILE_HEADER = NEWLINE.join([
	"<?php",
	"/* THIS IS A GENERATED FILE. DO NOT EDIT DIRECTLY. */",
	"$generated_i18n_strings = array(",
]) + NEWLINE

FILE_FOOTER = NEWLINE + NEWLINE.join([
	");",
	"/* THIS IS THE END OF THE GENERATED FILE */",
]) + NEWLINE


class PotParseError(Exception):
	"""The POT file could not be parsed."""


def EscapeSingleQuotes(text):
	return text.replace("'", "\\'")


def GetReferences(entry):
	"""Returns the entry's "#:" locations as a newline separated string."""
	references = []
	for fileName, line in entry.occurrences:
		if line:
			references.append(fileName + ":" + line)
		else:
			references.append(fileName)
	return NEWLINE.join(references)


def ConvertTranslationToPhp(entry, textdomain):
	"""Converts one POT entry to its block of PHP.

	The block is the entry's reference and extracted comments followed by a
	translation call. Entries without a msgid get no call, only comments.
	"""
	php = ""

	references = GetReferences(entry)
	if references:
		prefix = TAB + "// Reference: "
		php += prefix + references.replace(NEWLINE, NEWLINE + prefix) + NEWLINE

	if entry.comment:
		extracted = entry.comment.replace(NEWLINE, NEWLINE + TAB + "   ")
		php += TAB + "/* " + extracted + " */" + NEWLINE

	if entry.msgid != "":
		original = EscapeSingleQuotes(entry.msgid)

		if not entry.msgid_plural:
			php += TAB + "__( '" + original + "', '" + textdomain + "' )"
		else:
			plural = EscapeSingleQuotes(entry.msgid_plural)
			php += TAB + "_n_noop( '" + original + "', '" + plural + "', '" + textdomain + "' )"

	return php


def LoadPot(potFileName):
	with open(potFileName, encoding="utf-8") as f:
		contents = f.read()

	# polib reports syntax errors as OSError; the file itself was read above
	try:
		return polib.pofile(contents)
	except OSError as e:
		raise PotParseError(potFileName + ": " + str(e)) from e


def GetDefaultContextEntries(pot):
	return [entry for entry in pot if not entry.msgctxt and not entry.obsolete]


def ConvertPot2Php(potFileName, phpFileName, options):
	"""Writes the PHP stubs for every string of potFileName to phpFileName.

	options is a mapping holding the "textdomain" used in the generated calls.
	Returns the number of PHP blocks written.
	"""
	pot = LoadPot(potFileName)

	output = []
	for entry in GetDefaultContextEntries(pot):
		php = ConvertTranslationToPhp(entry, options["textdomain"])
		if php != "":
			output.append(php)

	fileOutput = FILE_HEADER + SEPARATOR.join(output) + FILE_FOOTER

	with open(phpFileName, "w", encoding="utf-8", newline=NEWLINE) as f:
		print(fileOutput, end="", file=f)

	return len(output)


def main():
	count = ConvertPot2Php(DEFAULT_POT_FILE, DEFAULT_PHP_FILE, {"textdomain": DEFAULT_TEXTDOMAIN})
	print("Wrote " + str(count) + " strings to " + DEFAULT_PHP_FILE)


if __name__ == "__main__":
	main()
