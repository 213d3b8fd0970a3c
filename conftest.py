import logging

import pytest
import py.path
import structlog

import grove

logging.basicConfig()
logging.getLogger().setLevel(logging.DEBUG)
structlog.configure(
    processors=[
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.dev.ConsoleRenderer(),
    ],
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
)


@pytest.fixture
def tmprepo(tmpdir: py.path.local) -> grove.Repository:

    root = tmpdir.join("tmprepo")
    return grove.create_repository(root.strpath)


@pytest.fixture
def tmpdb(tmprepo: grove.Repository) -> grove.storage.fs.FSDatabase:

    return tmprepo.objects


@pytest.fixture(autouse=True)
def config(tmpdir: py.path.local, monkeypatch: pytest.MonkeyPatch) -> py.path.local:

    config_dir = tmpdir.join("config").ensure(dir=True)
    monkeypatch.setattr(
        grove._config, "SYSTEM_CONFIG", config_dir.join("system.conf").strpath
    )
    monkeypatch.setattr(
        grove._config, "USER_CONFIG", config_dir.join("user.conf").strpath
    )
    monkeypatch.delenv("GROVE_DEBUG", raising=False)
    monkeypatch.delenv("GROVE_SENTRY_DSN", raising=False)
    return config_dir
