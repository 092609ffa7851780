import argparse, datetime, os

import pytest
import simplejson as json
from dateutil.tz import tzutc

from json_api_doc import parse_args, run
from json_api_doc.command import BaseCommand, CreateDocumentationCommand
from json_api_doc.exceptions import BadRequestError, InvalidParameterError


@pytest.fixture
def dirs(tmp_path):
    resource_dir = tmp_path / "resource"
    resource_dir.mkdir()
    result_dir = tmp_path / "result"
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({
        "resource_dir": str(resource_dir) + "/",
        "result_dir": str(result_dir) + "/",
    }))
    return resource_dir, result_dir, str(config_file)


def _config(dirs):
    resource_dir, result_dir, _ = dirs
    return {"resource_dir": str(resource_dir), "result_dir": str(result_dir)}


def test_current_datetime_default_is_now():
    command = BaseCommand({})
    before = datetime.datetime.now(tzutc())
    command.initialize(argparse.Namespace(current_datetime="now"))
    assert command.current_datetime.tzinfo is not None
    assert command.current_datetime >= before


def test_current_datetime_parsed():
    command = BaseCommand({})
    command.initialize(argparse.Namespace(current_datetime="2018-11-01 14:45"))
    assert command.current_datetime == datetime.datetime(2018, 11, 1, 14, 45, tzinfo=tzutc())


@pytest.mark.parametrize("value", ["2018-11-01", "2018-11-01T14:45", "yesterday", "2018-13-01 14:45"])
def test_current_datetime_invalid(value, capsys):
    command = BaseCommand({})
    with pytest.raises(InvalidParameterError):
        command.initialize(argparse.Namespace(current_datetime=value))
    assert "Invalid date format" in capsys.readouterr().out


def test_current_datetime_not_a_string(capsys):
    command = BaseCommand({})
    with pytest.raises(InvalidParameterError):
        command.initialize(argparse.Namespace(current_datetime=None))
    assert "is not a string" in capsys.readouterr().out


def test_invalid_datetime_stops_before_execute(dirs):
    resource_dir, result_dir, config_file = dirs
    (resource_dir / "a.json").write_text('{"a": 1}')
    with pytest.raises(InvalidParameterError):
        run(["-c", config_file, "app:doc:create", "-j", "a.json", "-d", "bad"])
    assert not result_dir.exists()


def test_create_documentation(dirs, capsys):
    resource_dir, result_dir, config_file = dirs
    (resource_dir / "widget.json").write_text('{"count": 3, "active": true}')

    code = run(["-c", config_file, "app:doc:create", "-j", "widget.json", "-f", "Widget"])

    assert code == 0
    content = (result_dir / "widget.yaml").read_text()
    assert content.startswith("Widget:\n  type: object\n")
    out = capsys.readouterr().out
    assert "Create documentation..." in out
    assert "json file: widget.json" in out
    assert "yaml file: widget.yaml" in out
    assert "[OK] DONE" in out


def test_yml_file_option(dirs):
    resource_dir, result_dir, config_file = dirs
    (resource_dir / "widget.json").write_text('{}')
    run(["-c", config_file, "app:doc:create", "-j", "widget.json", "-y", "out.yml"])
    assert (result_dir / "out.yml").read_text() == "ObjectField:\n  type: object\n"


def test_empty_field_name_falls_back(dirs):
    resource_dir, result_dir, config_file = dirs
    (resource_dir / "widget.json").write_text('{}')
    run(["-c", config_file, "app:doc:create", "-j", "widget.json", "-f", ""])
    assert (result_dir / "widget.yaml").read_text() == "ObjectField:\n  type: object\n"


def test_missing_json_file_option(dirs):
    _, result_dir, config_file = dirs
    with pytest.raises(BadRequestError) as e:
        run(["-c", config_file, "app:doc:create"])
    assert e.value.message == "json filename required"
    assert e.value.status_code == 400
    assert not result_dir.exists()


def test_unreadable_json_file(dirs):
    _, result_dir, config_file = dirs
    with pytest.raises(BadRequestError) as e:
        run(["-c", config_file, "app:doc:create", "-j", "missing.json"])
    assert e.value.message.startswith("Can not get content from file")
    assert not result_dir.exists()


@pytest.mark.parametrize("content", ["[1, 2]", '"text"', "3", "{not json"])
def test_json_root_must_be_an_object(dirs, content):
    resource_dir, result_dir, config_file = dirs
    (resource_dir / "bad.json").write_text(content)
    with pytest.raises(BadRequestError) as e:
        run(["-c", config_file, "app:doc:create", "-j", "bad.json"])
    assert e.value.message == "Can not get array from json"
    assert not result_dir.exists()


def test_default_yaml_name_from_stem(dirs):
    command = CreateDocumentationCommand(_config(dirs))
    command.initialize(argparse.Namespace(current_datetime="now"))
    request = command.build_request(argparse.Namespace(
        json_file="sub/orders.list.json", yml_file=None, field_name="Order"))
    assert request.yaml_filename == "orders.list.yaml"
    assert request.field_name == "Order"


def test_default_yaml_name_without_stem(dirs):
    command = CreateDocumentationCommand(_config(dirs))
    command.initialize(argparse.Namespace(current_datetime="2020-01-02 03:04"))
    request = command.build_request(argparse.Namespace(
        json_file=".json", yml_file=None, field_name=None))
    assert request.yaml_filename == "doc-2020-01-02-03-04-00.yaml"
    assert request.field_name == "ObjectField"


def test_command_is_required(dirs):
    _, _, config_file = dirs
    with pytest.raises(SystemExit):
        parse_args(["-c", config_file])


def test_result_dir_is_created(dirs):
    resource_dir, result_dir, config_file = dirs
    (resource_dir / "a.json").write_text('{"a": null}')
    run(["-c", config_file, "app:doc:create", "-j", "a.json"])
    assert os.path.isdir(str(result_dir))
    assert (result_dir / "a.yaml").exists()
