from utils.logger import sanitize_log_data

def test_password_redaction():
    data = {"email": "user@example.com", "password": "supersecret123"}
    sanitized = sanitize_log_data(data)

    assert sanitized["email"] == "user@example.com"
    assert sanitized["password"] == "***REDACTED***"


def test_refresh_token_partial_redaction():
    data = {"x-refresh-token": "3f9a1c77d0e4b2a8" * 8}
    sanitized = sanitize_log_data(data)

    assert sanitized["x-refresh-token"] == "3f9a1c77..."


def test_salt_redaction():
    # Salt wins over the token prefix rule
    sanitized = sanitize_log_data({"token_salt": "ab" * 32})
    assert sanitized["token_salt"] == "***REDACTED***"

    assert sanitize_log_data({"client_secret_token": "s" * 40})["client_secret_token"] == "***REDACTED***"

    assert sanitize_log_data({"salt": "abc"})["salt"] == "***REDACTED***"


def test_nested_dict_sanitization():
    data = {
        "user": {
            "email": "user@example.com",
            "password": "secret123"
        }
    }
    sanitized = sanitize_log_data(data)

    assert sanitized["user"]["email"] == data["user"]["email"]
    assert sanitized["user"]["password"] == "***REDACTED***"


def test_non_sensitive_data_unchanged():
    data = {"user_id": 123, "email": "test@example.com", "list_id": 7}
    assert sanitize_log_data(data) == data
