"""A small client register with a list view, an entry form and settings."""

from __future__ import annotations

import html
import json
from dataclasses import asdict, dataclass, fields
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

CLIENTS_KEY = "widgetlab.crm.clients"
CONFIRM_CLEAR_MESSAGE = "Do you really want to clear the data?"


@dataclass
class Client:
    """A client record."""

    first_name: str = ""
    last_name: str = ""
    description: str = ""

    def render(self) -> str:
        return (
            '<div class="client" style="margin-bottom: 50px">'
            f"<p>First Name: {html.escape(self.first_name)}</p>"
            f"<p>Last Name: {html.escape(self.last_name)}</p>"
            "<p>Description:</p>"
            f"{html.escape(self.description)}"
            "</div>"
        )


def _client_from_dict(data: Any) -> Client:
    if not isinstance(data, dict):
        raise ValueError("client must be an object")
    values = {}
    for item in fields(Client):
        value = data.get(item.name)
        if not isinstance(value, str):
            raise ValueError(f"field {item.name!r} must be a string")
        values[item.name] = value
    return Client(**values)


class Scene(Enum):
    CLIENTS_LIST = "clients_list"
    NEW_CLIENT_FORM = "new_client_form"
    SETTINGS = "settings"


class AddClientForm:
    """Form for entering a new client; ``client`` holds the fields being edited."""

    def __init__(self, on_add: Callable[[Client], object], on_abort: Callable[[], object]) -> None:
        self.on_add = on_add
        self.on_abort = on_abort
        self.client = Client()

    def can_add(self) -> bool:
        return bool(self.client.first_name) and bool(self.client.last_name)

    def add(self) -> bool:
        """Hand the entered client on and start over with an empty one."""
        client, self.client = self.client, Client()
        self.on_add(client)
        return True

    def abort(self) -> bool:
        self.on_abort()
        return False

    def view(self) -> str:
        client = self.client
        disabled = "" if self.can_add() else " disabled"
        return (
            '<div class="names">'
            '<input class="new-client firstname" placeholder="First name" '
            f'value="{html.escape(client.first_name, quote=True)}"/>'
            '<input class="new-client lastname" placeholder="Last name" '
            f'value="{html.escape(client.last_name, quote=True)}"/>'
            '<textarea class="new-client description" placeholder="Description">'
            f"{html.escape(client.description)}</textarea>"
            "</div>"
            f"<button{disabled}>Add New</button>"
            "<button>Go Back</button>"
        )


class _ClientStore:
    def __init__(self, path: Optional[Union[str, Path]]) -> None:
        self.path = Path(path) if path is not None else None
        self._memory: Dict[str, str] = {}

    def _read_area(self) -> Dict[str, str]:
        if self.path is None:
            return dict(self._memory)
        try:
            area = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return {}
        return area if isinstance(area, dict) else {}

    def _write_area(self, area: Dict[str, str]) -> None:
        if self.path is None:
            self._memory = dict(area)
            return
        try:
            self.path.write_text(json.dumps(area), encoding="utf-8")
        except OSError:
            pass

    def load(self) -> List[Client]:
        raw = self._read_area().get(CLIENTS_KEY)
        if not isinstance(raw, str):
            return []
        try:
            items = json.loads(raw)
            if not isinstance(items, list):
                return []
            return [_client_from_dict(item) for item in items]
        except ValueError:
            return []

    def store(self, clients: List[Client]) -> None:
        area = self._read_area()
        area[CLIENTS_KEY] = json.dumps([asdict(c) for c in clients])
        self._write_area(area)

    def remove(self) -> None:
        area = self._read_area()
        if area.pop(CLIENTS_KEY, None) is not None:
            self._write_area(area)


class Crm:
    """The application; actions return whether a re-render is needed."""

    def __init__(self, path: Optional[Union[str, Path]] = None) -> None:
        self._store = _ClientStore(path)
        self.clients: List[Client] = self._store.load()
        self.scene = Scene.CLIENTS_LIST
        self.form: Optional[AddClientForm] = None

    def switch_to(self, scene: Scene) -> bool:
        self.scene = scene
        if scene is Scene.NEW_CLIENT_FORM:
            if self.form is None:
                self.form = AddClientForm(
                    on_add=self.add_client,
                    on_abort=lambda: self.switch_to(Scene.CLIENTS_LIST),
                )
        else:
            self.form = None
        return True

    def add_client(self, client: Client) -> bool:
        """Add and persist a client; a re-render is needed only on the list scene."""
        self.clients.append(client)
        self._store.store(self.clients)
        return self.scene is Scene.CLIENTS_LIST

    def clear_clients(self, confirm: Callable[[str], bool]) -> bool:
        """Remove every client if ``confirm`` agrees to the question it is asked."""
        if not confirm(CONFIRM_CLEAR_MESSAGE):
            return False
        self.clients.clear()
        self._store.remove()
        return True

    def view(self) -> str:
        if self.scene is Scene.CLIENTS_LIST:
            clients = "".join(client.render() for client in self.clients)
            return (
                '<div class="crm">'
                "<h1>List of clients</h1>"
                f'<div class="clients">{clients}</div>'
                "<button>Add New</button>"
                "<button>Settings</button>"
                "</div>"
            )
        if self.scene is Scene.NEW_CLIENT_FORM:
            if self.form is None:
                self.switch_to(Scene.NEW_CLIENT_FORM)
            assert self.form is not None
            return f'<div class="crm"><h1>Add a new client</h1>{self.form.view()}</div>'
        return (
            "<div>"
            "<h1>Settings</h1>"
            "<button>Remove all clients</button>"
            "<button>Go Back</button>"
            "</div>"
        )