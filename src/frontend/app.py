"""Main Textual app for the ircpush config panel."""

from __future__ import annotations

from typing import Any

from rich.text import Text
from textual import on
from textual.app import App, ComposeResult
from textual.containers import Container, Horizontal, ScrollableContainer, Vertical
from textual.widgets import Button, Footer, Input, Static, Switch

from adapters.json_settings import SECTION
from adapters.value_parsing import parse_bool
from core.config import AUTH_TOKEN_SETTING, DEFAULTS, PORT_SETTING, SERVER_SETTING
import settings

from .constants import ACCENT, SWITCH_SETTINGS
from .modals import EXIT_CHOICES, RELOAD_CHOICES, ChoiceScreen
from .state import PanelState
from .validators import parse_port, parse_server, token_warning


class ConfigPanelApp(App):
    """Config panel editing the "ircpush" section of config.json."""

    CSS = """
    Screen {
        background: #0f1a21;
        color: #e8eef5;
    }

    #header {
        height: 6;
        padding: 1 4;
        border-bottom: solid #2a3a46;
    }

    #header-left, #header-right {
        width: 1fr;
    }

    #header-right {
        content-align: right top;
        text-align: right;
    }

    #title {
        text-style: bold;
    }

    .subtle {
        color: #c6d2dd;
    }

    #form {
        padding: 1 4;
    }

    .form-label {
        margin-top: 1;
        color: #c6d2dd;
    }

    .settings-error {
        color: #ff6b6b;
    }

    .status-loaded {
        color: #6bcb77;
    }

    .status-modified {
        color: #ffd93d;
    }

    .status-error {
        color: #ff6b6b;
    }

    .modal-dialog {
        width: 50;
        height: auto;
        padding: 1 2;
        border: thick #2a3a46;
        background: #16232c;
    }

    ModalScreen {
        align: center middle;
    }
    """

    BINDINGS = [
        ("ctrl+s", "save_config", "Save"),
        ("ctrl+r", "reload_config", "Reload"),
        ("ctrl+q", "request_quit", "Quit"),
        ("ctrl+c", "request_quit", "Quit"),
    ]

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        # The panel edits what is stored in the file, so env overrides are off.
        self.registry = settings.registry(with_env=False)
        self.panel_state = PanelState()
        self._loading_form = False

    def compose(self) -> ComposeResult:
        with Container(id="header"):
            with Horizontal(id="header-row"):
                with Vertical(id="header-left"):
                    yield Static(self._title_text(), id="title")
                    yield Static(f"file: {self.registry.path}", classes="subtle")
                with Vertical(id="header-right"):
                    yield Static("", id="header-status")
                    yield Horizontal(
                        Button("Save", id="save-btn"),
                        Button("Reload", id="reload-btn"),
                        id="header-actions",
                    )

        with ScrollableContainer(id="form"):
            yield Static("server", classes="form-label")
            yield Input(placeholder="localhost", id="server")
            yield Static("", id="server-error", classes="settings-error")
            yield Static("port", classes="form-label")
            yield Input(placeholder="26144", id="port")
            yield Static("", id="port-error", classes="settings-error")
            yield Static("auth token", classes="form-label")
            yield Input(password=True, id="auth-token")
            yield Static("", id="auth-token-error", classes="settings-error")
            yield Static("only push while away", classes="form-label")
            yield Switch(id="away-only")
            yield Static("clear notifications on return from away", classes="form-label")
            yield Switch(id="clear-on-return")
            yield Static("debug output (includes payloads)", classes="form-label")
            yield Switch(id="debug")
        yield Footer()

    def on_mount(self) -> None:
        self._load_config()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "save-btn":
            self.action_save_config()
        elif event.button.id == "reload-btn":
            self.action_reload_config()

    def action_save_config(self) -> None:
        self._save_config()

    def action_reload_config(self) -> None:
        if self.panel_state.dirty:
            self.push_screen(
                ChoiceScreen("Reload config?", "Unsaved changes will be lost.", RELOAD_CHOICES),
                self._handle_reload_choice,
            )
        else:
            self._load_config()

    def action_request_quit(self) -> None:
        if self.panel_state.dirty:
            self.push_screen(
                ChoiceScreen("Unsaved changes", "Save changes before exit?", EXIT_CHOICES),
                self._handle_exit_choice,
            )
        else:
            self.exit()

    def _handle_exit_choice(self, choice: str | None) -> None:
        if choice == "save":
            if self._save_config():
                self.exit()
        elif choice == "discard":
            self.exit()

    def _handle_reload_choice(self, choice: str | None) -> None:
        if choice == "save":
            if self._save_config():
                self._load_config()
        elif choice == "reload":
            self._load_config()

    def _load_config(self) -> None:
        try:
            section = self.registry.load_document().get(SECTION, {})
            if not isinstance(section, dict):
                raise RuntimeError(f'"{SECTION}" must be an object')
            self.panel_state.reset(section)
        except RuntimeError as exc:
            self.panel_state.fail(str(exc))
        except OSError as exc:
            self.panel_state.fail(f"read failed: {exc.strerror or exc}")
        self._fill_form()
        self._refresh_header()

    def _save_config(self) -> bool:
        if not self.panel_state.loaded:
            self.panel_state.error = "Nothing to save"
            self._refresh_header()
            return False
        try:
            self.registry.update(self.panel_state.pending)
        except (OSError, RuntimeError) as exc:
            self.panel_state.error = f"save failed: {exc}"
            self._refresh_header()
            return False
        self.panel_state.commit()
        self._refresh_header()
        return True

    def update_setting(self, name: str, value: Any) -> None:
        """Stage one edited setting and refresh the dirty marker."""

        self.panel_state.stage(name, value)
        self._refresh_header()

    def _fill_form(self) -> None:
        state = self.panel_state
        self._loading_form = True
        self.query_one("#server", Input).value = str(state.value(SERVER_SETTING))
        self.query_one("#port", Input).value = str(state.value(PORT_SETTING))
        token = str(state.value(AUTH_TOKEN_SETTING))
        self.query_one("#auth-token", Input).value = token
        for widget_id, name in SWITCH_SETTINGS.items():
            value = parse_bool(state.value(name))
            self.query_one(f"#{widget_id}", Switch).value = (
                DEFAULTS[name] if value is None else value
            )
        self._set_error("server-error", "")
        self._set_error("port-error", "")
        self._set_error("auth-token-error", token_warning(token))
        self._loading_form = False

    @on(Input.Changed, "#server")
    def _on_server_changed(self, event: Input.Changed) -> None:
        if self._loading_form:
            return
        result = parse_server(event.value)
        self._set_error("server-error", result.error or "")
        if result.error is None:
            self.update_setting(SERVER_SETTING, result.value)

    @on(Input.Changed, "#port")
    def _on_port_changed(self, event: Input.Changed) -> None:
        if self._loading_form:
            return
        result = parse_port(event.value)
        self._set_error("port-error", result.error or "")
        if result.error is None:
            self.update_setting(PORT_SETTING, result.value)

    @on(Input.Changed, "#auth-token")
    def _on_token_changed(self, event: Input.Changed) -> None:
        if self._loading_form:
            return
        self._set_error("auth-token-error", token_warning(event.value))
        self.update_setting(AUTH_TOKEN_SETTING, event.value)

    @on(Switch.Changed)
    def _on_switch_changed(self, event: Switch.Changed) -> None:
        if self._loading_form:
            return
        name = SWITCH_SETTINGS.get(event.switch.id or "")
        if name:
            self.update_setting(name, bool(event.value))

    def _set_error(self, error_id: str, message: str) -> None:
        self.query_one(f"#{error_id}", Static).update(message)

    def _refresh_header(self) -> None:
        state = self.panel_state
        status = self.query_one("#header-status", Static)
        save_btn = self.query_one("#save-btn", Button)

        status.remove_class("status-loaded", "status-modified", "status-error")
        if state.error:
            status.update(state.error)
            status.add_class("status-error")
        elif state.dirty:
            status.update(f"config: {len(state.pending)} unsaved *")
            status.add_class("status-modified")
        else:
            status.update("config: loaded")
            status.add_class("status-loaded")

        save_btn.disabled = not state.loaded or not state.dirty

    @staticmethod
    def _title_text() -> Text:
        return Text.assemble(
            ("IRC", ACCENT),
            ("PUSH > Config Panel", "bold"),
        )
