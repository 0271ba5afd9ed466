import os
import subprocess
import sys
import textwrap
from pathlib import Path


def _run(code: str, **env_overrides) -> subprocess.CompletedProcess:
    repo_root = Path(__file__).resolve().parents[1]
    env = os.environ.copy()
    env.update(env_overrides)
    env["PYTHONPATH"] = os.pathsep.join(
        [str(repo_root), env.get("PYTHONPATH", "")] if env.get("PYTHONPATH") else [str(repo_root)]
    )
    return subprocess.run(
        [sys.executable, "-c", textwrap.dedent(code)],
        cwd=str(repo_root),
        env=env,
        capture_output=True,
        text=True,
        check=False,
    )


def test_verify_content_disabled_from_env():
    proc = _run(
        """
        from dupindexer.indexer import config

        assert config.VERIFY_CONTENT is False
        """,
        DUPINDEXER_VERIFY_CONTENT="off",
    )
    if proc.returncode != 0:
        raise AssertionError(
            "Subprocess failed with DUPINDEXER_VERIFY_CONTENT=off\n"
            f"stdout:\n{proc.stdout}\n\n"
            f"stderr:\n{proc.stderr}\n"
        )


def test_verify_content_invalid_env():
    proc = _run("import dupindexer", DUPINDEXER_VERIFY_CONTENT="sometimes")
    assert proc.returncode != 0
    assert "DUPINDEXER_VERIFY_CONTENT must be a boolean-like value." in proc.stderr
