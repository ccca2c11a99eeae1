"""
Тесты точки входа: отчёт в stdout и коды выхода
"""

import hashlib
import json
import logging
import sys
from pathlib import Path

import pytest
from botocore.stub import Stubber

# Добавляем корневую директорию в PYTHONPATH
sys.path.insert(0, str(Path(__file__).parent))

import s3check.main as main_module
from s3check.config import CONFIG_ENV_VAR, Settings
from s3check.logging_config import HumanReadableFormatter, JSONFormatter, setup_logging
from s3check_core.errors import EmptyLocalInventoryError
from s3check_core.s3_storage import S3Storage

BUCKET = "test-bucket"


def md5_of(data: bytes) -> str:
    return hashlib.md5(data).hexdigest()


@pytest.fixture(autouse=True)
def isolated(monkeypatch, tmp_path):
    """Рабочая папка во tmp, без перенастройки логирования и без .env"""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(main_module, "setup_logging", lambda: None)
    monkeypatch.setattr(main_module, "load_dotenv", lambda: False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "config.env"))


@pytest.fixture
def config(tmp_path):
    (tmp_path / "config.env").write_text(f"localfolder=data\nregion=eu-central-1\nbucketname={BUCKET}\n")
    return tmp_path / "config.env"


@pytest.fixture
def stubbed_storage(monkeypatch):
    """S3Storage с активным Stubber, подставляется вместо реального клиента"""
    storage = S3Storage(region="eu-central-1", bucket_name=BUCKET)
    stubber = Stubber(storage.s3_client)
    stubber.activate()
    monkeypatch.setattr(main_module, "S3Storage", lambda **kwargs: storage)
    yield stubber
    stubber.deactivate()


def listing(*objects):
    return {
        "Name": BUCKET,
        "IsTruncated": False,
        "KeyCount": len(objects),
        "Contents": [{"Key": key, "ETag": f'"{etag}"', "Size": 1} for key, etag in objects],
    }


def test_report_printed_to_stdout(tmp_path, config, stubbed_storage, capsys):
    data = tmp_path / "data"
    (data / "dir").mkdir(parents=True)
    (data / "a.txt").write_bytes(b"local a")
    (data / "dir" / "d.txt").write_bytes(b"same")
    (data / "c.txt").write_bytes(b"only local")

    stubbed_storage.add_response("list_objects_v2", listing(
        ("a.txt", "remote-hash"),
        ("b.txt", "whatever"),
        ("dir/", md5_of(b"")),
        ("dir/d.txt", md5_of(b"same")),
    ))

    assert main_module.main() == main_module.EXIT_SUCCESS

    out = capsys.readouterr().out
    assert out == (
        "----- S3 Files -----\n"
        f"a.txt - Checksum error - S3[remote-hash] - Local[{md5_of(b'local a')}]\n"
        "b.txt Not found\n"
        "\n"
        "----- Local Files -----\n"
        "c.txt Not found\n"
    )


def test_missing_config(capsys):
    assert main_module.main() == main_module.EXIT_CONFIG_ERROR
    assert capsys.readouterr().out == ""


def test_missing_local_folder(config, monkeypatch, capsys):
    monkeypatch.setattr(main_module, "S3Storage", lambda **kwargs: pytest.fail("S3 не должен запрашиваться"))

    assert main_module.main() == main_module.EXIT_FILESYSTEM_ERROR
    assert capsys.readouterr().out == ""


def test_scenario_c_empty_local_folder_aborts(tmp_path, config, monkeypatch, capsys):
    """Пустая локальная папка: S3 не запрашивается, отчёта нет"""
    (tmp_path / "data").mkdir()
    monkeypatch.setattr(main_module, "S3Storage", lambda **kwargs: pytest.fail("S3 не должен запрашиваться"))

    assert main_module.main() == main_module.EXIT_EMPTY_LOCAL
    assert capsys.readouterr().out == ""


def test_remote_error_no_partial_report(tmp_path, config, stubbed_storage, capsys):
    (tmp_path / "data").mkdir()
    (tmp_path / "data" / "a.txt").write_text("x")
    stubbed_storage.add_client_error("list_objects_v2", service_error_code="AccessDenied", http_status_code=403)

    assert main_module.main() == main_module.EXIT_REMOTE_ERROR
    assert capsys.readouterr().out == ""


def test_run_check_raises_for_empty_folder(tmp_path):
    (tmp_path / "data").mkdir()
    settings = Settings(local_folder="data", region="eu-central-1", bucket_name=BUCKET)

    with pytest.raises(EmptyLocalInventoryError):
        main_module.run_check(settings, storage=object())


@pytest.fixture
def real_logging(monkeypatch):
    """Настоящий setup_logging; его handler снимается после теста"""
    monkeypatch.setattr(main_module, "setup_logging", setup_logging)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_FORMAT", raising=False)
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, (JSONFormatter, HumanReadableFormatter)):
            root.removeHandler(handler)
    root.setLevel(level)


def test_logs_never_reach_stdout(tmp_path, config, stubbed_storage, real_logging, capsys):
    """stdout - только отчёт, все сообщения лога в stderr"""
    (tmp_path / "data").mkdir()
    (tmp_path / "data" / "c.txt").write_text("only local")
    stubbed_storage.add_response("list_objects_v2", listing())

    assert main_module.main() == main_module.EXIT_SUCCESS

    captured = capsys.readouterr()
    assert captured.out == "----- S3 Files -----\n\n----- Local Files -----\nc.txt Not found\n"
    assert "S3 Check v0.1" in captured.err
    assert f"Checking s3 Bucket objects ({BUCKET})..." in captured.err


def test_json_logs_carry_run_context(tmp_path, stubbed_storage, real_logging, monkeypatch, capsys):
    monkeypatch.setenv("LOG_FORMAT", "json")
    (tmp_path / "config.env").write_text(
        f"localfolder=data\nregion=eu-central-1\nbucketname={BUCKET}\nendpointurl=http://localhost:9000\n"
    )
    (tmp_path / "data").mkdir()
    (tmp_path / "data" / "a.txt").write_text("x")
    stubbed_storage.add_response("list_objects_v2", listing(("a.txt", md5_of(b"x"))))

    assert main_module.main() == main_module.EXIT_SUCCESS

    records = [json.loads(line) for line in capsys.readouterr().err.splitlines() if line]
    counted = [r for r in records if "entry_count" in r]

    assert [r["entry_count"] for r in counted] == [1, 1]
    for record in counted:
        assert record["bucket"] == BUCKET
        assert record["region"] == "eu-central-1"
        assert record["endpoint_url"] == "http://localhost:9000"
        assert record["local_root"] == str(Path.cwd() / "data")


def test_json_error_record_has_exit_code(tmp_path, config, stubbed_storage, real_logging, monkeypatch, capsys):
    monkeypatch.setenv("LOG_FORMAT", "json")
    (tmp_path / "data").mkdir()
    (tmp_path / "data" / "a.txt").write_text("x")
    stubbed_storage.add_client_error("list_objects_v2", service_error_code="AccessDenied", http_status_code=403)

    assert main_module.main() == main_module.EXIT_REMOTE_ERROR

    captured = capsys.readouterr()
    records = [json.loads(line) for line in captured.err.splitlines() if line]

    assert captured.out == ""
    assert {"exit_code": 5, "error_code": "AccessDenied"}.items() <= records[-1].items()
