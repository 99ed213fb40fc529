from __future__ import annotations

import io

from aedwait.data.snapshot import FeedSnapshot, WaitTimeEntry
from aedwait.rendering.report import format_report, render_report


def test_english_report_matches_expected_layout() -> None:
    snapshot = FeedSnapshot(
        update_time="2024-01-01 10:00",
        entries=[WaitTimeEntry(hosp_name="Queen Mary", top_wait="1 Hr")],
    )
    out = io.StringIO()

    render_report(snapshot, "en", out=out)

    lines = out.getvalue().splitlines()
    assert lines[0] == "Accident and Emergency Waiting Time by Hospital"
    assert lines[1] == "Last updated on:\t2024-01-01 10:00"
    assert lines[2] == "Queen Mary".ljust(44) + "\t1 Hr"
    assert len(lines) == 3


def test_chinese_reports_use_narrow_column() -> None:
    snapshot = FeedSnapshot(
        update_time="2024/1/1 10:00",
        entries=[WaitTimeEntry(hosp_name="瑪麗醫院", top_wait="超過 1 小時")],
    )

    tc_lines = format_report(snapshot, "tc")
    sc_lines = format_report(snapshot, "sc")

    assert tc_lines[0] == "急症室等候時間"
    assert tc_lines[1] == "最後更新時間\t2024/1/1 10:00"
    assert tc_lines[2] == "瑪麗醫院".ljust(20) + "\t超過 1 小時"
    assert sc_lines[0] == "急症室等候时间"
    assert sc_lines[1] == "最后更新时间\t2024/1/1 10:00"


def test_report_preserves_entry_order() -> None:
    names = ["Tuen Mun Hospital", "Caritas Medical Centre", "Alice Ho Miu Ling Nethersole Hospital"]
    snapshot = FeedSnapshot(
        update_time="now",
        entries=[WaitTimeEntry(hosp_name=name, top_wait="2 hours") for name in names],
    )

    lines = format_report(snapshot, "en")[2:]

    assert [line.split("\t")[0].rstrip() for line in lines] == names


def test_render_report_defaults_to_stdout(capsys) -> None:
    snapshot = FeedSnapshot(update_time="now", entries=[])

    render_report(snapshot, "t")

    captured = capsys.readouterr()
    assert captured.out == "急症室等候時間\n最後更新時間\tnow\n"
    assert captured.err == ""
