import json

import pytest

from curryer.common.configuration import MODE
from curryer.tools.apply import literal, main


def test_literal():
    assert literal("3") == 3
    assert literal("[1, 2]") == [1, 2]
    assert literal("abc") == "abc"


def test_curry_to_result(capsys):
    assert main(["operator:add", "1", "2"]) == 0
    assert capsys.readouterr().out.strip() == "3"


def test_partial_prints_report_when_deferred(capsys):
    assert main(["operator:add", "1", "--mode", "partial"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["mode_label"] == "Partial application"
    assert payload["function"] == "add"
    assert payload["args_collected"] == 1
    assert payload["args_still_needed"] == 1


def test_mode_from_config(tmp_path, capsys):
    path = tmp_path / "curry.json"
    path.write_text(json.dumps({MODE: "partial"}))
    assert main(["operator:add", "--configfile", str(path)]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["mode_label"] == "Partial application"
    assert payload["args_collected"] == 0


def test_too_many_arguments_fail(capsys):
    assert main(["operator:add", "1", "2", "3", "--mode", "partial"]) == 2


def test_bad_target():
    with pytest.raises(SystemExit):
        main(["operator"])


def test_info_inspects_a_deferred_chain(capsys):
    assert main(["operator:add", "1", "--info"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["mode_label"] == "Currying"
    assert payload["args_still_needed"] == 1


def test_info_refuses_a_complete_chain(capsys):
    with pytest.raises(SystemExit) as e:
        main(["operator:add", "1", "2", "--info"])
    assert e.value.code == 2
    assert "--info needs fewer than 2" in capsys.readouterr().err
