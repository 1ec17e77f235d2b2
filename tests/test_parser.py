import json

from arbgen.parser import ValuesFolder, locale_from_filename, parse_bundle


def _write(folder, name, data):
    path = folder / name
    path.write_text(data if isinstance(data, str) else json.dumps(data), "utf-8")
    return path


def test_locale_from_filename():
    assert locale_from_filename("strings_en.arb") == "en"
    assert locale_from_filename("strings_fr_CA.arb") == "fr_CA"
    assert locale_from_filename("Strings_de.arb") == "de"


def test_parse_bundle_drops_metadata(tmp_path):
    path = _write(
        tmp_path,
        "strings_en.arb",
        '{"@@locale": "en", "title": "Title", "@title": {"description": "x"}, "count": 3, "zed": "Z"}',
    )
    bundle = parse_bundle(path)

    assert bundle.locale == "en"
    assert list(bundle.entries) == ["title", "count", "zed"]
    assert bundle.entries["count"] == "3"


def test_parse_bundle_skips_nested_values(tmp_path, caplog):
    path = _write(tmp_path, "strings_en.arb", {"title": "T", "nested": {"a": "b"}})
    bundle = parse_bundle(path)

    assert bundle.entries == {"title": "T"}
    assert 'Skipping "nested"' in caplog.text


def test_malformed_files_are_excluded(tmp_path, caplog):
    _write(tmp_path, "strings_en.arb", {"title": "Title"})
    _write(tmp_path, "strings_fr.arb", '{"title": "Titre",')
    _write(tmp_path, "strings_de.arb", '["not", "an", "object"]')
    _write(tmp_path, "other_it.arb", {"title": "Titolo"})
    _write(tmp_path, "strings_es.json", {"title": "Título"})

    bundles = ValuesFolder(tmp_path).bundles()

    assert [b.locale for b in bundles] == ["en"]
    assert "Error parsing strings_fr.arb" in caplog.text
    assert "strings_de.arb does not contain a JSON object" in caplog.text


def test_bundles_are_sorted_by_file_name(tmp_path):
    for locale in ("fr", "ar_EG", "en"):
        _write(tmp_path, f"strings_{locale}.arb", {"title": locale})

    assert [b.locale for b in ValuesFolder(tmp_path).bundles()] == ["ar_EG", "en", "fr"]


def test_missing_folder_has_no_bundles(tmp_path):
    assert ValuesFolder(tmp_path / "missing").bundles() == []


def test_create_bundle(tmp_path):
    folder = ValuesFolder(tmp_path / "res" / "values")
    bundle = folder.create_bundle("en")

    assert bundle.locale == "en"
    assert bundle.entries == {}
    assert (tmp_path / "res" / "values" / "strings_en.arb").read_text("utf-8") == "{}\n"
    assert [b.locale for b in folder.bundles()] == ["en"]


def test_parse_bundle_keeps_json_spelling_of_scalars(tmp_path):
    path = _write(tmp_path, "strings_en.arb", '{"yes": true, "nothing": null, "ratio": 1.5}')
    bundle = parse_bundle(path)

    assert bundle.entries == {"yes": "true", "nothing": "null", "ratio": "1.5"}
