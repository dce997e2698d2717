"""Portal, bridge and user factories.

Each level is a small read-only object holding the URL strings captured from
the level above (portal -> bridge host -> username) and exposing request
callables built from those URLs. Nothing is cached or shared: asking twice
for the same bridge or user returns independent objects with their own
callables and identical URL behavior.
"""

from __future__ import annotations

import warnings
from functools import partial
from typing import Any, Awaitable, Callable

from huebridge.core.config import DEFAULT_PORTAL_URL
from huebridge.core.request_builder import JsonRequester, ResourceId, object_url, parametrize

Call = Callable[[], Awaitable[Any]]
# Bodies are optional and GET/DELETE drop extra arguments, so these stay loose.
CallWithData = Callable[..., Awaitable[Any]]
CallById = Callable[..., Awaitable[Any]]
CallByIdWithData = Callable[..., Awaitable[Any]]


class _ReadOnly:
    """Attributes are set once in `__init__` through `_freeze` and never change."""

    def _freeze(self, **attrs: Any) -> None:
        vars(self).update(attrs)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")


class HueAPI(_ReadOnly):
    """Portal level: bridge discovery and bridge objects."""

    portal_url: str
    discover: Call

    def __init__(
        self,
        requester: JsonRequester,
        *,
        portal_url: str = DEFAULT_PORTAL_URL,
        bridge_scheme: str = "http",
    ) -> None:
        self._freeze(
            _requester=requester,
            _bridge_scheme=bridge_scheme,
            portal_url=portal_url,
            # Discover local bridges.
            discover=partial(requester.get, portal_url),
        )

    def bridge(self, ip: str) -> HueBridge:
        """Create a bridge object for an IP address or hostname."""

        return HueBridge(self._requester, ip, scheme=self._bridge_scheme)

    def __repr__(self) -> str:
        return f"HueAPI(portal_url={self.portal_url!r})"


class HueBridge(_ReadOnly):
    """Bridge level: whitelist user creation and user objects."""

    ip: str
    url: str

    def __init__(self, requester: JsonRequester, ip: str, *, scheme: str = "http") -> None:
        self._freeze(
            _requester=requester,
            ip=ip,
            url=f"{scheme}://{ip}/api",
        )

    def create_user(self, device_type: str) -> Awaitable[Any]:
        """Create a new user in the bridge whitelist.

        The link button on the bridge must have been pressed shortly before;
        otherwise the bridge answers with an error object (returned as-is).
        """

        return self._requester.post(self.url, {"devicetype": device_type})

    def user(self, username: str) -> HueUser:
        return HueUser(self._requester, self.url, username)

    def __repr__(self) -> str:
        return f"HueBridge(ip={self.ip!r})"


class HueUser(_ReadOnly):
    """User level: every resource operation of the bridge API.

    Methods taking an identifier accept a string or an int; it is appended to
    the collection URL verbatim. Every call returns an awaitable resolving to
    the parsed JSON response.
    """

    username: str
    url: str
    info_url: str
    config_url: str
    lights_url: str
    groups_url: str
    schedules_url: str
    scenes_url: str
    sensors_url: str
    rules_url: str

    # Info
    get_timezones: Call

    # Configuration
    delete_user: CallById
    get_config: Call
    set_config: CallWithData
    get_full_state: Call

    # Lights
    get_lights: Call
    get_new_lights: Call
    search_for_new_lights: Call
    get_light: CallById
    set_light: CallByIdWithData
    set_light_state: CallByIdWithData
    delete_light: CallById

    # Groups
    get_groups: Call
    create_group: CallWithData
    get_group: CallById
    set_group: CallByIdWithData
    set_group_state: CallByIdWithData
    delete_group: CallById

    # Schedules
    get_schedules: Call
    create_schedule: CallWithData
    get_schedule: CallById
    set_schedule: CallByIdWithData
    delete_schedule: CallById

    # Scenes
    get_scenes: Call
    create_scene: CallWithData
    get_scene: CallById
    set_scene: CallByIdWithData
    delete_scene: CallById

    # Sensors
    get_sensors: Call
    create_sensor: CallWithData
    search_for_new_sensors: Call
    get_new_sensors: Call
    get_sensor: CallById
    set_sensor: CallByIdWithData
    set_sensor_config: CallByIdWithData
    set_sensor_state: CallByIdWithData
    delete_sensor: CallById

    # Rules
    get_rules: Call
    create_rule: CallWithData
    get_rule: CallById
    set_rule: CallByIdWithData
    delete_rule: CallById

    def __init__(self, requester: JsonRequester, bridge_url: str, username: str) -> None:
        get, put, post, delete = requester.get, requester.put, requester.post, requester.delete

        user_url = f"{bridge_url}/{username}"
        info_url = f"{user_url}/info"
        config_url = f"{user_url}/config"
        lights_url = f"{user_url}/lights"
        groups_url = f"{user_url}/groups"
        schedules_url = f"{user_url}/schedules"
        scenes_url = f"{user_url}/scenes"
        sensors_url = f"{user_url}/sensors"
        rules_url = f"{user_url}/rules"

        light_url = object_url(lights_url)
        group_url = object_url(groups_url)
        schedule_url = object_url(schedules_url)
        scene_url = object_url(scenes_url)
        sensor_url = object_url(sensors_url)
        rule_url = object_url(rules_url)
        whitelist_url = object_url(f"{config_url}/whitelist")

        self._freeze(
            _requester=requester,
            _bridge_url=bridge_url,
            _scene_url=scene_url,
            username=username,
            url=user_url,
            info_url=info_url,
            config_url=config_url,
            lights_url=lights_url,
            groups_url=groups_url,
            schedules_url=schedules_url,
            scenes_url=scenes_url,
            sensors_url=sensors_url,
            rules_url=rules_url,
            get_timezones=partial(get, f"{info_url}/timezones"),
            delete_user=parametrize(delete, whitelist_url),
            get_config=partial(get, config_url),
            set_config=partial(put, config_url),
            get_full_state=partial(get, user_url),
            get_lights=partial(get, lights_url),
            get_new_lights=partial(get, f"{lights_url}/new"),
            search_for_new_lights=partial(post, lights_url, None),
            get_light=parametrize(get, light_url),
            set_light=parametrize(put, light_url),
            set_light_state=parametrize(put, lambda light_id: f"{light_url(light_id)}/state"),
            delete_light=parametrize(delete, light_url),
            get_groups=partial(get, groups_url),
            create_group=partial(post, groups_url),
            get_group=parametrize(get, group_url),
            set_group=parametrize(put, group_url),
            set_group_state=parametrize(put, lambda group_id: f"{group_url(group_id)}/action"),
            delete_group=parametrize(delete, group_url),
            get_schedules=partial(get, schedules_url),
            create_schedule=partial(post, schedules_url),
            get_schedule=parametrize(get, schedule_url),
            set_schedule=parametrize(put, schedule_url),
            delete_schedule=parametrize(delete, schedule_url),
            get_scenes=partial(get, scenes_url),
            create_scene=partial(post, scenes_url),
            get_scene=parametrize(get, scene_url),
            set_scene=parametrize(put, scene_url),
            delete_scene=parametrize(delete, scene_url),
            get_sensors=partial(get, sensors_url),
            create_sensor=partial(post, sensors_url),
            search_for_new_sensors=partial(post, sensors_url, None),
            get_new_sensors=partial(get, f"{sensors_url}/new"),
            get_sensor=parametrize(get, sensor_url),
            set_sensor=parametrize(put, sensor_url),
            set_sensor_config=parametrize(put, lambda sensor_id: f"{sensor_url(sensor_id)}/config"),
            set_sensor_state=parametrize(put, lambda sensor_id: f"{sensor_url(sensor_id)}/state"),
            delete_sensor=parametrize(delete, sensor_url),
            get_rules=partial(get, rules_url),
            create_rule=partial(post, rules_url),
            get_rule=parametrize(get, rule_url),
            set_rule=parametrize(put, rule_url),
            delete_rule=parametrize(delete, rule_url),
        )

    def create(self, device_type: str) -> Awaitable[Any]:
        """Create this user in the bridge whitelist with a chosen username.

        Deprecated by the bridge API, which now generates usernames; use
        `HueBridge.create_user` instead.
        """

        warnings.warn(
            "HueUser.create is deprecated; use HueBridge.create_user",
            DeprecationWarning,
            stacklevel=2,
        )
        data = {"username": self.username, "devicetype": device_type}
        return self._requester.post(self._bridge_url, data)

    def set_scene_light_state(self, scene_id: ResourceId, light_id: ResourceId, data: Any) -> Awaitable[Any]:
        """Modify the state of one light within a scene."""

        return self._requester.put(f"{self._scene_url(scene_id)}/lights/{light_id}/state", data)

    def __repr__(self) -> str:
        return f"HueUser(url={self.url!r})"
