from hanztravel.config import Settings


def test_env_file_with_unrelated_keys_loads(tmp_path, monkeypatch):
    monkeypatch.delenv("SESSION_TTL_SECONDS", raising=False)
    env = tmp_path / ".env"
    env.write_text("SESSION_TTL_SECONDS=60\nOPENAI_API_KEY=unused\nSOME_OTHER_TOOL=1\n")

    s = Settings(_env_file=str(env))

    assert s.SESSION_TTL_SECONDS == 60
    assert not hasattr(s, "OPENAI_API_KEY")


def test_environment_overrides_env_file(tmp_path, monkeypatch):
    env = tmp_path / ".env"
    env.write_text("DEFAULT_ORIGIN=LAX\n")
    monkeypatch.setenv("DEFAULT_ORIGIN", "SFO")

    assert Settings(_env_file=str(env)).DEFAULT_ORIGIN == "SFO"
