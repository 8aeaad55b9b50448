"""Chrome-specific commands.

chromedriver exposes vendor endpoints under /session/{id}/chromium/... and
/session/{id}/goog/... for app launching, network emulation, DevTools
Protocol passthrough and casting. ChromeCommand renders them the same way
the standard Command does, so WebDriverSession.cmd() dispatches both.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict

from ..protocol.request import RequestData, RequestMethod, render_request
from ..protocol.response import convert

if TYPE_CHECKING:
    from ..sdk.client import WebDriverSession


class NetworkConditions(BaseModel):
    """Simulated network conditions.

    Throughputs are in bytes per second; latency is in milliseconds. Field
    names are the wire names chromedriver uses.
    """

    offline: bool = False
    latency: int = 0
    download_throughput: int = -1
    upload_throughput: int = -1


class ChromeCommandType(str, Enum):
    """Extra commands specific to Chrome."""

    LAUNCH_APP = "launch_app"
    GET_NETWORK_CONDITIONS = "get_network_conditions"
    SET_NETWORK_CONDITIONS = "set_network_conditions"
    EXECUTE_CDP_COMMAND = "execute_cdp_command"
    GET_SINKS = "get_sinks"
    GET_ISSUE_MESSAGE = "get_issue_message"
    SET_SINK_TO_USE = "set_sink_to_use"
    START_TAB_MIRRORING = "start_tab_mirroring"
    STOP_CASTING = "stop_casting"


_SESSION = "/session/{session_id}"

CHROME_ROUTES: dict[ChromeCommandType, tuple[RequestMethod, str]] = {
    ChromeCommandType.LAUNCH_APP: (RequestMethod.POST, _SESSION + "/chromium/launch_app"),
    ChromeCommandType.GET_NETWORK_CONDITIONS: (
        RequestMethod.GET,
        _SESSION + "/chromium/network_conditions",
    ),
    ChromeCommandType.SET_NETWORK_CONDITIONS: (
        RequestMethod.POST,
        _SESSION + "/chromium/network_conditions",
    ),
    ChromeCommandType.EXECUTE_CDP_COMMAND: (RequestMethod.POST, _SESSION + "/goog/cdp/execute"),
    ChromeCommandType.GET_SINKS: (RequestMethod.GET, _SESSION + "/goog/cast/get_sinks"),
    ChromeCommandType.GET_ISSUE_MESSAGE: (
        RequestMethod.GET,
        _SESSION + "/goog/cast/get_issue_message",
    ),
    ChromeCommandType.SET_SINK_TO_USE: (
        RequestMethod.POST,
        _SESSION + "/goog/cast/set_sink_to_use",
    ),
    ChromeCommandType.START_TAB_MIRRORING: (
        RequestMethod.POST,
        _SESSION + "/goog/cast/start_tab_mirroring",
    ),
    ChromeCommandType.STOP_CASTING: (RequestMethod.POST, _SESSION + "/goog/cast/stop_casting"),
}


class ChromeCommand(BaseModel):
    """A Chrome vendor command."""

    model_config = ConfigDict(frozen=True)

    cmd: ChromeCommandType
    body: Any = None

    def format_request(self, session_id: str) -> RequestData:
        method, template = CHROME_ROUTES[self.cmd]
        return render_request(method, template, session_id, body=self.body)

    @classmethod
    def launch_app(cls, app_id: str) -> ChromeCommand:
        return cls(cmd=ChromeCommandType.LAUNCH_APP, body={"id": app_id})

    @classmethod
    def get_network_conditions(cls) -> ChromeCommand:
        return cls(cmd=ChromeCommandType.GET_NETWORK_CONDITIONS)

    @classmethod
    def set_network_conditions(cls, conditions: NetworkConditions) -> ChromeCommand:
        return cls(
            cmd=ChromeCommandType.SET_NETWORK_CONDITIONS,
            body={"network_conditions": conditions.model_dump()},
        )

    @classmethod
    def execute_cdp_command(
        cls, command: str, params: dict[str, Any] | None = None
    ) -> ChromeCommand:
        """Pass a DevTools Protocol command through to the browser.

        `params` is sent as given; the DevTools Protocol is open-ended, so no
        schema is applied.
        """
        return cls(
            cmd=ChromeCommandType.EXECUTE_CDP_COMMAND,
            body={"cmd": command, "params": params if params is not None else {}},
        )

    @classmethod
    def get_sinks(cls) -> ChromeCommand:
        return cls(cmd=ChromeCommandType.GET_SINKS)

    @classmethod
    def get_issue_message(cls) -> ChromeCommand:
        return cls(cmd=ChromeCommandType.GET_ISSUE_MESSAGE)

    @classmethod
    def set_sink_to_use(cls, sink_name: str) -> ChromeCommand:
        return cls(cmd=ChromeCommandType.SET_SINK_TO_USE, body={"sinkName": sink_name})

    @classmethod
    def start_tab_mirroring(cls, sink_name: str) -> ChromeCommand:
        return cls(cmd=ChromeCommandType.START_TAB_MIRRORING, body={"sinkName": sink_name})

    @classmethod
    def stop_casting(cls, sink_name: str) -> ChromeCommand:
        return cls(cmd=ChromeCommandType.STOP_CASTING, body={"sinkName": sink_name})


class ChromeDevTools:
    """Chrome vendor operations bound to a session.

    Usage:
        dev_tools = session.chrome
        await dev_tools.set_network_conditions(NetworkConditions(offline=True))
        version = await dev_tools.execute_cdp("Browser.getVersion")
    """

    def __init__(self, session: WebDriverSession):
        self._session = session

    async def launch_app(self, app_id: str) -> None:
        await self._session.cmd(ChromeCommand.launch_app(app_id))

    async def get_network_conditions(self) -> NetworkConditions:
        value = await self._session.cmd(ChromeCommand.get_network_conditions())
        return convert(value, NetworkConditions)

    async def set_network_conditions(self, conditions: NetworkConditions) -> None:
        await self._session.cmd(ChromeCommand.set_network_conditions(conditions))

    async def execute_cdp(self, command: str, params: dict[str, Any] | None = None) -> Any:
        """Run a DevTools Protocol command and return its result object."""
        return await self._session.cmd(ChromeCommand.execute_cdp_command(command, params))

    async def get_sinks(self) -> list[dict[str, Any]]:
        value = await self._session.cmd(ChromeCommand.get_sinks())
        return convert(value, list[dict[str, Any]])

    async def get_issue_message(self) -> str:
        value = await self._session.cmd(ChromeCommand.get_issue_message())
        return convert(value, str)

    async def set_sink_to_use(self, sink_name: str) -> None:
        await self._session.cmd(ChromeCommand.set_sink_to_use(sink_name))

    async def start_tab_mirroring(self, sink_name: str) -> None:
        await self._session.cmd(ChromeCommand.start_tab_mirroring(sink_name))

    async def stop_casting(self, sink_name: str) -> None:
        await self._session.cmd(ChromeCommand.stop_casting(sink_name))
