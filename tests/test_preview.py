from __future__ import annotations

from pywater._preview import preview_for_log


def test_preview_truncates_long_strings() -> None:
    preview = preview_for_log("x" * 600, max_string=10)
    assert preview.startswith("x" * 10)
    assert "<truncated>" in preview


def test_preview_decodes_utf8_bytes() -> None:
    assert preview_for_log(b'{"2026-10-19": 8}') == '{"2026-10-19": 8}'


def test_preview_summarises_binary_bytes() -> None:
    assert preview_for_log(b"\xff\xfe\x00") == "<bytes:3b>"


def test_preview_caps_collections() -> None:
    preview = preview_for_log({str(i): i for i in range(30)}, max_items=5)
    assert len(preview) == 6
    assert preview["…"] == "<25 more>"
    assert preview_for_log(list(range(8)), max_items=3) == [0, 1, 2, "<5 more>"]
