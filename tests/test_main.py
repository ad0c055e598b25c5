"""Tests for the server entrypoint."""

from unittest.mock import patch

from fastapi import FastAPI


def test_module_app_is_configured():
    from video_mock import main

    assert isinstance(main.app, FastAPI)
    assert main.app.state.dispatcher.counter.snapshot() == {}


def test_run_starts_uvicorn_with_configured_port():
    from video_mock import main

    with patch.object(main.uvicorn, "run") as uvicorn_run:
        main.run()

    uvicorn_run.assert_called_once()
    _, kwargs = uvicorn_run.call_args
    assert kwargs["port"] == main.settings.app.port
    assert kwargs["host"] == main.settings.app.host
    assert kwargs["log_config"] is None
