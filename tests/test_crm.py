import pytest

from widgetlab.crm import CONFIRM_CLEAR_MESSAGE, AddClientForm, Client, Crm, Scene


def _client(first="Ada", last="Lovelace", description="notes"):
    return Client(first_name=first, last_name=last, description=description)


def test_client_render_contains_fields_escaped():
    page = _client(description="<b>").render()
    assert "<p>First Name: Ada</p>" in page
    assert "<p>Last Name: Lovelace</p>" in page
    assert page.endswith("&lt;b&gt;</div>")


def test_form_can_add_needs_both_names():
    form = AddClientForm(on_add=lambda c: None, on_abort=lambda: None)
    assert form.can_add() is False
    form.client.first_name = "Ada"
    assert form.can_add() is False
    form.client.last_name = "Lovelace"
    assert form.can_add() is True


def test_form_add_emits_client_and_resets():
    received = []
    form = AddClientForm(on_add=received.append, on_abort=lambda: None)
    form.client = _client()
    assert form.add() is True
    assert received == [_client()]
    assert form.client == Client()


def test_form_abort_calls_callback_without_render():
    calls = []
    form = AddClientForm(on_add=lambda c: None, on_abort=lambda: calls.append(1))
    assert form.abort() is False
    assert calls == [1]


def test_form_view_disables_button_until_complete():
    form = AddClientForm(on_add=lambda c: None, on_abort=lambda: None)
    assert "<button disabled>Add New</button>" in form.view()
    form.client = _client()
    page = form.view()
    assert "<button>Add New</button>" in page
    assert 'value="Ada"' in page


def test_add_client_rerenders_only_on_list_scene():
    crm = Crm()
    assert crm.add_client(_client()) is True
    crm.switch_to(Scene.SETTINGS)
    assert crm.add_client(_client("Bo", "Li")) is False
    assert [c.first_name for c in crm.clients] == ["Ada", "Bo"]


def test_clients_persist_in_file(tmp_path):
    path = tmp_path / "store.json"
    crm = Crm(path)
    crm.add_client(_client())
    reopened = Crm(path)
    assert reopened.clients == [_client()]


def test_corrupt_store_gives_empty_list(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("not json", encoding="utf-8")
    assert Crm(path).clients == []


def test_clear_clients_declined_keeps_data(tmp_path):
    path = tmp_path / "store.json"
    crm = Crm(path)
    crm.add_client(_client())
    questions = []

    def decline(message):
        questions.append(message)
        return False

    assert crm.clear_clients(decline) is False
    assert questions == [CONFIRM_CLEAR_MESSAGE]
    assert Crm(path).clients == [_client()]


def test_clear_clients_confirmed_removes_data(tmp_path):
    path = tmp_path / "store.json"
    crm = Crm(path)
    crm.add_client(_client())
    assert crm.clear_clients(lambda message: True) is True
    assert crm.clients == []
    assert Crm(path).clients == []


def test_form_flow_through_app():
    crm = Crm()
    assert crm.switch_to(Scene.NEW_CLIENT_FORM) is True
    crm.form.client = _client()
    crm.form.add()
    assert crm.clients == [_client()]
    assert crm.scene is Scene.NEW_CLIENT_FORM
    crm.form.abort()
    assert crm.scene is Scene.CLIENTS_LIST
    assert crm.form is None


@pytest.mark.parametrize(
    "scene, heading",
    [
        (Scene.CLIENTS_LIST, "<h1>List of clients</h1>"),
        (Scene.NEW_CLIENT_FORM, "<h1>Add a new client</h1>"),
        (Scene.SETTINGS, "<h1>Settings</h1>"),
    ],
)
def test_view_per_scene(scene, heading):
    crm = Crm()
    crm.switch_to(scene)
    assert heading in crm.view()


def test_list_view_includes_clients():
    crm = Crm()
    crm.add_client(_client())
    assert _client().render() in crm.view()
    assert "Remove all clients" not in crm.view()