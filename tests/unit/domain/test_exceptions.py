from smarthome.domain.exceptions import ConfigurationError, SmartHomeError, ValidationError


def test_hierarchy():
    assert issubclass(ValidationError, SmartHomeError)
    assert issubclass(ConfigurationError, SmartHomeError)


def test_detail_defaults_to_empty_dict():
    error = ValidationError("Invalid arguments")
    assert str(error) == "Invalid arguments"
    assert error.detail == {}


def test_detail_is_kept():
    error = ConfigurationError("unreadable", detail={"path": "/tmp/x"})
    assert error.detail["path"] == "/tmp/x"
