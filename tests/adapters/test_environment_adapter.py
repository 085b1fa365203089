from __future__ import annotations

from lib_gh_commands.adapters.environment import MemoryEnvironment, OsEnvironment


def test_memory_environment_is_isolated() -> None:
    source = {"A": "1"}
    env = MemoryEnvironment(source)
    env.set("B", "2")
    assert env.get("A") == "1"
    assert env.get("B") == "2"
    assert "B" not in source


def test_memory_environment_update_respects_override_flag() -> None:
    env = MemoryEnvironment({"A": "1"})
    env.update({"A": "x", "C": "3"}, override=False)
    assert env.to_dict() == {"A": "1", "C": "3"}
    env.update({"A": "x"})
    assert env.get("A") == "x"


def test_os_environment_reads_and_writes_backing_mapping() -> None:
    backing: dict[str, str] = {"PATH": "/bin"}
    env = OsEnvironment(backing)
    assert env.get("PATH") == "/bin"
    assert env.get("MISSING") is None
    env.set("FOO", "bar")
    assert backing["FOO"] == "bar"


def test_os_environment_defaults_to_process_environment(monkeypatch) -> None:
    monkeypatch.setenv("LIB_GH_COMMANDS_PROBE", "present")
    assert OsEnvironment().get("LIB_GH_COMMANDS_PROBE") == "present"
