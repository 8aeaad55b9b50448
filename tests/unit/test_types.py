"""Unit tests for protocol value types."""

from driverwire.protocol.types import Cookie, Key, SameSite, ServerStatus, WindowRect


class TestCookie:
    """Test Cookie wire form."""

    def test_wire_form_uses_protocol_names(self):
        cookie = Cookie(
            name="cookietest",
            value="wiki-session",
            domain=".wikipedia.org",
            path="/",
            same_site=SameSite.LAX,
            http_only=True,
        )

        assert cookie.to_wire() == {
            "name": "cookietest",
            "value": "wiki-session",
            "domain": ".wikipedia.org",
            "path": "/",
            "sameSite": "Lax",
            "httpOnly": True,
        }

    def test_unset_fields_are_omitted(self):
        assert Cookie(name="a", value="b").to_wire() == {"name": "a", "value": "b"}

    def test_parse_from_wire(self):
        cookie = Cookie.model_validate(
            {
                "name": "sid",
                "value": "xyz",
                "path": "/",
                "domain": "example.com",
                "secure": True,
                "httpOnly": False,
                "expiry": 1700000000,
                "sameSite": "Strict",
            }
        )

        assert cookie.http_only is False
        assert cookie.same_site is SameSite.STRICT
        assert cookie.expiry == 1700000000

    def test_same_site_none_is_a_value(self):
        """SameSite=None is distinct from an unset policy."""
        cookie = Cookie(name="a", value="b", same_site=SameSite.NONE)

        assert cookie.to_wire()["sameSite"] == "None"


class TestKey:
    """Test special key code points."""

    def test_code_points(self):
        assert Key.ENTER.value == "\ue007"
        assert Key.CONTROL.value == "\ue009"
        assert Key.F12.value == "\ue03c"

    def test_command_is_meta(self):
        assert Key.COMMAND is Key.META

    def test_concatenation(self):
        assert Key.CONTROL + "a" == "\ue009a"
        assert "abc" + Key.ENTER == "abc\ue007"
        assert Key.SHIFT + Key.TAB == "\ue008\ue004"


class TestOtherTypes:
    """Test the remaining value types."""

    def test_window_rect_position_optional(self):
        rect = WindowRect(width=800, height=600)

        assert rect.x is None
        assert rect.width == 800

    def test_server_status_message_default(self):
        assert ServerStatus(ready=False).message == ""
