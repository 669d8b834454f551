import json

import pytest

from l10n_audit.arb import extract_keys, load_arb_file
from l10n_audit.cli import check_arb_keys_main
from l10n_audit.config import ComparatorConfig, parse_language_pair
from l10n_audit.errors import MalformedResourceFile, MissingResourceFile
from l10n_audit.keys import KeySetComparison, load_key_sets, render_report


def _write_arb(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture()
def arb_files(tmp_path):
    en = _write_arb(
        tmp_path / "l10n/app_en.arb",
        {"@@locale": "en", "a": "A", "@a": {"description": "only en"}, "b": "B"},
    )
    ja = _write_arb(tmp_path / "l10n/app_ja.arb", {"@@locale": "ja", "b": "ビー", "c": "シー"})
    return en, ja


def _comparison(en_keys, ja_keys) -> KeySetComparison:
    return KeySetComparison.from_key_sets({"en": frozenset(en_keys), "ja": frozenset(ja_keys)})


def test_extract_keys_skips_metadata():
    data = {"@@locale": "ja", "title": "タイトル", "@title": {}, "count": "{n}件"}

    assert extract_keys(data) == {"title", "count"}


def test_comparison_scenario():
    comparison = _comparison({"a", "b"}, {"b", "c"})

    assert comparison.union == {"a", "b", "c"}
    assert comparison.missing("en") == ["c"]
    assert comparison.missing("ja") == ["a"]
    assert comparison.unique("en") == ["a"]
    assert comparison.unique("ja") == ["c"]
    assert [(p.key, p.present, p.absent) for p in comparison.partial_keys()] == [
        ("a", ("en",), ("ja",)),
        ("c", ("ja",), ("en",)),
    ]
    assert not comparison.is_consistent


def test_unique_with_three_languages():
    comparison = KeySetComparison.from_key_sets(
        {
            "en": frozenset({"a", "b", "x"}),
            "ja": frozenset({"a", "b"}),
            "pt": frozenset({"a", "x", "y"}),
        }
    )

    assert comparison.unique("en") == []
    assert comparison.unique("pt") == ["y"]
    assert comparison.missing("ja") == ["x", "y"]
    partial = {p.key: (p.present, p.absent) for p in comparison.partial_keys()}
    assert "a" not in partial
    assert partial["x"] == (("en", "pt"), ("ja",))


def test_consistent_sets():
    comparison = _comparison({"a"}, {"a"})

    assert comparison.is_consistent
    assert comparison.partial_keys() == []
    assert "JA: no missing keys" in render_report(comparison)


def test_load_key_sets_keeps_configured_order(arb_files):
    en, ja = arb_files
    key_sets = load_key_sets(ComparatorConfig(files=(("ja", ja), ("en", en))))

    assert list(key_sets) == ["ja", "en"]
    assert key_sets["en"] == {"a", "b"}


def test_missing_file_raises(tmp_path):
    with pytest.raises(MissingResourceFile) as excinfo:
        load_arb_file(tmp_path / "app_fr.arb")

    assert excinfo.value.path == tmp_path / "app_fr.arb"


def test_malformed_file_raises(tmp_path):
    path = tmp_path / "app_en.arb"
    path.write_text('["not", "a", "map"]', encoding="utf-8")

    with pytest.raises(MalformedResourceFile):
        load_arb_file(path)


def test_duplicate_language_is_rejected(tmp_path):
    with pytest.raises(ValueError):
        ComparatorConfig(files=(("en", tmp_path / "a.arb"), ("en", tmp_path / "b.arb")))


def test_parse_language_pair():
    lang, path = parse_language_pair("ja=lib/l10n/app_ja.arb")

    assert lang == "ja"
    assert path.as_posix() == "lib/l10n/app_ja.arb"
    with pytest.raises(ValueError):
        parse_language_pair("lib/l10n/app_ja.arb")


def test_render_report_sections():
    report = render_report(_comparison({"a", "b"}, {"b", "c"}))

    assert "Total keys: 3" in report
    assert "EN is missing 1 key(s):\n  - c" in report
    assert "JA is missing 1 key(s):\n  - a" in report
    assert "'a':\n  present in: EN\n  missing in: JA" in report
    assert "'b':" not in report
    assert "EN unique keys (1):\n  - a" in report
    assert "JA unique keys (1):\n  - c" in report


def test_cli_report(arb_files, capsys):
    en, ja = arb_files

    exit_code = check_arb_keys_main(["--lang", f"en={en}", "--lang", f"ja={ja}"])
    out = capsys.readouterr().out

    assert exit_code == 0
    assert out.startswith("EN: 2 keys\nJA: 2 keys\n")
    assert "'c':\n  present in: JA\n  missing in: EN" in out


def test_cli_strict_fails_on_mismatch(arb_files):
    en, ja = arb_files

    assert check_arb_keys_main(["--strict", "--lang", f"en={en}", "--lang", f"ja={ja}"]) == 1


def test_cli_arb_dir(arb_files, capsys):
    en, _ = arb_files

    exit_code = check_arb_keys_main(["--arb-dir", str(en.parent), "--langs", "en", "ja"])

    assert exit_code == 0
    assert "Total keys: 3" in capsys.readouterr().out


def test_cli_aborts_on_missing_file(arb_files, tmp_path, capsys, caplog):
    en, _ = arb_files
    missing = tmp_path / "l10n/app_fr.arb"

    exit_code = check_arb_keys_main(
        ["--lang", f"fr={missing}", "--lang", f"en={en}"]
    )
    captured = capsys.readouterr()

    assert exit_code == 1
    assert captured.out == ""
    assert str(missing) in caplog.text


def test_cli_aborts_on_malformed_file(tmp_path, capsys, caplog):
    en = _write_arb(tmp_path / "l10n/app_en.arb", {"@@locale": "en", "title": "Title"})
    ja = tmp_path / "l10n/app_ja.arb"
    ja.write_text("{bad", encoding="utf-8")

    exit_code = check_arb_keys_main(["--lang", f"en={en}", "--lang", f"ja={ja}"])
    out = capsys.readouterr().out

    assert exit_code == 1
    assert out == "EN: 1 keys\n"
    assert "Malformed ARB file" in caplog.text


def test_cli_rejects_lang_with_arb_dir(arb_files):
    en, _ = arb_files

    with pytest.raises(SystemExit) as excinfo:
        check_arb_keys_main(["--lang", f"en={en}", "--arb-dir", str(en.parent)])

    assert excinfo.value.code == 2


def test_cli_stops_after_loaded_languages(arb_files, tmp_path, capsys):
    en, _ = arb_files
    missing = tmp_path / "l10n/app_ja.arb.missing"

    exit_code = check_arb_keys_main(["--lang", f"en={en}", "--lang", f"ja={missing}"])
    out = capsys.readouterr().out

    assert exit_code == 1
    assert out == "EN: 2 keys\n"


def test_cli_report_is_deterministic(arb_files, capsys):
    en, ja = arb_files
    argv = ["--lang", f"en={en}", "--lang", f"ja={ja}"]

    check_arb_keys_main(argv)
    first = capsys.readouterr().out
    check_arb_keys_main(argv)
    second = capsys.readouterr().out

    assert first == second
