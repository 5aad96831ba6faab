import pytest
from polib import POEntry

from pomissing import (
    Catalog,
    CatalogEntry,
    DuplicateEntry,
    Header,
    MalformedEntry,
    parse_catalog,
    serialize_catalog,
)

HEADER = """\
# French translations for the Example frontend.
# Copyright (C) 2024 Example Contributors
#
#, fuzzy
msgid ""
msgstr ""
"Project-Id-Version: example-frontend 1.0\\n"
"Language: fr\\n"
"Content-Type: text/plain; charset=UTF-8\\n"
"Plural-Forms: nplurals=2; plural=(n > 1);\\n"
"""

ENTRIES = """
#. Shown on the toolbar
#: src/App.vue:12 src/Toolbar.vue:4
msgid "Save"
msgstr "Enregistrer"

# Keep it short
#: src/App.vue:20
#, javascript-format
msgctxt "button"
msgid "Open"
msgstr ""

#: src/App.vue:21
msgctxt "menu"
msgid "Open"
msgstr "Ouvrir"

#: src/Help.vue:3
msgid ""
"First line\\n"
"Second line with a \\"quote\\", a \\\\ and a\\ttab"
msgstr "   "

#: src/Files.vue:9
msgid "%d file"
msgid_plural "%d files"
msgstr[0] "%d fichier"
msgstr[1] ""
"""


@pytest.fixture
def catalog():
    return parse_catalog(HEADER + ENTRIES)


def test_parse_entries(catalog: Catalog):
    assert [entry.key for entry in catalog] == [
        (None, "Save"),
        ("button", "Open"),
        ("menu", "Open"),
        (None, 'First line\nSecond line with a "quote", a \\ and a\ttab'),
        (None, "%d file"),
    ]
    assert [entry.msgstr for entry in catalog][:4] == ["Enregistrer", "", "Ouvrir", "   "]
    assert [entry.is_translated() for entry in catalog] == [
        True,
        False,
        True,
        False,
        False,
    ]


def test_parse_header(catalog: Catalog):
    assert catalog.header.comment.splitlines()[0] == (
        "French translations for the Example frontend."
    )
    assert catalog.header.metadata["Language"] == "fr"
    assert catalog.header.metadata["Plural-Forms"] == "nplurals=2; plural=(n > 1);"
    assert catalog.header.flags == ["fuzzy"]
    assert catalog.header.present
    assert catalog.entries_by_key().get((None, "")) is None


def test_parse_comments(catalog: Catalog):
    save = catalog.entries_by_key().get((None, "Save"))
    assert save is not None
    assert save.comments == [
        "#. Shown on the toolbar",
        "#: src/App.vue:12 src/Toolbar.vue:4",
    ]

    button_open = catalog.entries_by_key().get(("button", "Open"))
    assert button_open is not None
    assert button_open.comments == [
        "# Keep it short",
        "#: src/App.vue:20",
        "#, javascript-format",
    ]


def test_trailing_comments_dropped():
    catalog = parse_catalog(HEADER + ENTRIES + "\n# Dangling comment\n#: src/Old.vue:1\n")
    assert len(catalog) == 5
    assert catalog.entries[-1].comments == ["#: src/Files.vue:9"]


def test_round_trip(catalog: Catalog):
    text = serialize_catalog(catalog)
    assert parse_catalog(text) == catalog
    assert str(parse_catalog(text)) == text


def test_round_trip_built_catalog():
    entries = [
        CatalogEntry(
            POEntry(
                msgid="Line one\nLine two",
                msgstr='Tab\there, "quoted" and back\\slash',
                tcomment="Translator note",
                occurrences=[("src/app.js", "12")],
            )
        ),
        CatalogEntry(POEntry(msgid="Empty", msgstr="")),
        CatalogEntry(POEntry(msgctxt="verb", msgid="Empty", msgstr="Vider")),
    ]
    catalog = Catalog(
        header=Header(comment="Built in memory", metadata={"Language": "fr"}),
        entries=entries,
    )

    parsed = parse_catalog(serialize_catalog(catalog))

    assert parsed == catalog
    assert parsed.entries[0].msgstr == 'Tab\there, "quoted" and back\\slash'
    assert parsed.entries[0].comments == ["# Translator note", "#: src/app.js:12"]


def test_serialize_is_deterministic(catalog: Catalog):
    assert serialize_catalog(catalog) == serialize_catalog(parse_catalog(HEADER + ENTRIES))


def test_serialize_layout(catalog: Catalog):
    text = serialize_catalog(catalog)
    assert text.startswith("# French translations for the Example frontend.\n")
    assert '\n\n#. Shown on the toolbar\n#: src/App.vue:12 src/Toolbar.vue:4\nmsgid "Save"\n' in text
    assert "\n\n\n" not in text
    # embedded newlines stay escaped inside quoted strings
    assert '"First line\\n"\n' in text


def test_no_wrapping():
    long_msgid = " ".join(["word"] * 40)
    catalog = parse_catalog(HEADER + f'\nmsgid "{long_msgid}"\nmsgstr ""\n', wrapwidth=0)
    assert f'msgid "{long_msgid}"\n' in serialize_catalog(catalog)

    wrapped = parse_catalog(HEADER + f'\nmsgid "{long_msgid}"\nmsgstr ""\n')
    assert f'msgid "{long_msgid}"\n' not in serialize_catalog(wrapped)
    assert parse_catalog(serialize_catalog(wrapped)) == wrapped


def test_obsolete_entries_kept():
    catalog = parse_catalog(HEADER + ENTRIES + '\n#~ msgid "Removed"\n#~ msgstr ""\n')
    assert catalog.entries[-1].obsolete
    assert catalog.entries_by_key().get((None, "Removed")) is None
    assert (None, "Removed") not in catalog.entries_by_key()
    assert '#~ msgid "Removed"' in serialize_catalog(catalog)


def test_empty_text():
    catalog = parse_catalog("")
    assert len(catalog) == 0
    assert catalog.header == Header(present=False)
    assert serialize_catalog(catalog) == ""


@pytest.mark.parametrize(
    "text",
    [
        '"continuation outside any field"\nmsgid "A"\nmsgstr ""\n',
        'msgstr "translation without msgid"\n',
        HEADER + '\nmsgstr "second msgstr"\n',
    ],
)
def test_malformed(text: str):
    with pytest.raises(MalformedEntry):
        parse_catalog(text)


def test_duplicate_keys_rejected():
    text = HEADER + '\nmsgid "Save"\nmsgstr ""\n\nmsgid "Save"\nmsgstr "Enregistrer"\n'
    with pytest.raises(DuplicateEntry) as exc_info:
        parse_catalog(text)
    assert exc_info.value.key == (None, "Save")
    assert "'Save'" in str(exc_info.value)


def test_same_msgid_different_context_allowed(catalog: Catalog):
    button_open = catalog.entries_by_key().get(("button", "Open"))
    menu_open = catalog.entries_by_key().get(("menu", "Open"))
    assert button_open is not None and menu_open is not None
    assert button_open.key != menu_open.key
    assert button_open != menu_open


def test_comments_of_first_entry_without_header():
    text = '# Translator note\n#: src/App.vue:1\nmsgid "A"\nmsgstr "a"\n\nmsgid "B"\nmsgstr ""\n'
    catalog = parse_catalog(text)

    assert not catalog.header.present
    assert catalog.header.comment == ""
    assert catalog.entries[0].comments == ["# Translator note", "#: src/App.vue:1"]
    assert serialize_catalog(catalog) == text


def test_header_written_as_read():
    text = (
        'msgid ""\n'
        'msgstr ""\n'
        '"POT-Creation-Date: 2024-03-01 10:00+0000\\n"\n'
        '"MIME-Version: 1.0\\n"\n'
        '"Content-Type: text/plain; charset=utf-8\\n"\n'
        '"Content-Transfer-Encoding: 8bit\\n"\n'
        '"X-Generator: @lingui/cli\\n"\n'
        '"Language: fr\\n"\n'
        "\n"
        "#: src/App.vue:12\n"
        'msgid "Save"\n'
        'msgstr "Enregistrer"\n'
    )
    catalog = parse_catalog(text)

    assert catalog.header.comment == ""
    assert list(catalog.header.metadata)[-1] == "Language"
    assert serialize_catalog(catalog) == text


def test_header_flags_kept():
    text = '#, fuzzy, no-wrap\nmsgid ""\nmsgstr ""\n"Language: fr\\n"\n\nmsgid "A"\nmsgstr ""\n'
    catalog = parse_catalog(text)

    assert catalog.header.flags == ["fuzzy", "no-wrap"]
    assert serialize_catalog(catalog) == text
