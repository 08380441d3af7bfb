from minishell.environment import Environment


def test_get_existing_and_missing():
    env = Environment({"A": "1"})
    assert env.get("A") == "1"
    assert env.get("B") is None


def test_set_new_goes_last():
    env = Environment({"A": "1", "B": "2"})
    env.set("C", "3")
    assert env.lines() == ["A=1", "B=2", "C=3"]


def test_set_existing_keeps_position():
    env = Environment({"A": "1", "B": "2"})
    env.set("A", "x")
    assert env.lines() == ["A=x", "B=2"]


def test_unset_removes():
    env = Environment({"A": "1", "B": "2"})
    env.unset("A")
    assert env.get("A") is None
    assert env.lines() == ["B=2"]


def test_unset_missing_is_noop():
    env = Environment({"A": "1"})
    env.unset("Z")
    assert env.lines() == ["A=1"]


def test_as_dict_is_a_copy():
    env = Environment({"A": "1"})
    copy = env.as_dict()
    copy["A"] = "changed"
    assert env.get("A") == "1"


def test_initial_mapping_not_mutated():
    initial = {"A": "1"}
    env = Environment(initial)
    env.set("A", "2")
    env.set("B", "3")
    assert initial == {"A": "1"}


def test_default_copies_process_environment(monkeypatch):
    monkeypatch.setenv("MINISHELL_TEST_VAR", "value")
    env = Environment()
    assert env.get("MINISHELL_TEST_VAR") == "value"


def test_contains_and_len():
    env = Environment({"A": "1", "B": "2"})
    assert "A" in env
    assert "Z" not in env
    assert len(env) == 2


def test_set_then_get_round_trip():
    env = Environment({})
    env.set("PATH", "/bin:/usr/bin")
    assert env.get("PATH") == "/bin:/usr/bin"
    assert env.as_dict() == {"PATH": "/bin:/usr/bin"}