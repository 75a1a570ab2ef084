from posts_api.config import load_settings


def test_defaults(monkeypatch):
    for name in ("TABLE_NAME", "AWS_REGION", "DYNAMODB_ENDPOINT_URL", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    s = load_settings()
    assert s.table_name is None
    assert s.aws_region is None
    assert s.dynamodb_endpoint_url is None
    assert s.log_level == "INFO"


def test_from_env(monkeypatch):
    monkeypatch.setenv("TABLE_NAME", "posts")
    monkeypatch.setenv("AWS_REGION", "us-west-2")
    monkeypatch.setenv("DYNAMODB_ENDPOINT_URL", "http://localhost:8000")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    s = load_settings()
    assert s.table_name == "posts"
    assert s.aws_region == "us-west-2"
    assert s.dynamodb_endpoint_url == "http://localhost:8000"
    assert s.log_level == "DEBUG"
