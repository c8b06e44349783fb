"""Tests for the in-memory host services.

Focus: protocol compliance, permission registration rules, locale fallback
and chat command routing.
"""

import pytest

from barricadewall.core import Player
from barricadewall.host import (
    ChatLog,
    ChatSink,
    CommandRegistry,
    CommandService,
    Localizer,
    MemoryPermissions,
    MessageRenderer,
    PermissionService,
)

PERM = "barricadetowall.use"


@pytest.fixture
def player():
    return Player(user_id=42, display_name="p", locale="fr")


def test_implementations_satisfy_protocols():
    assert isinstance(MemoryPermissions(), PermissionService)
    assert isinstance(Localizer(), MessageRenderer)
    assert isinstance(ChatLog(), ChatSink)
    assert isinstance(CommandRegistry(), CommandService)


class TestPermissions:
    def test_grant_requires_registration_to_count(self):
        perms = MemoryPermissions()
        perms.grant(42, PERM)
        assert perms.has_permission(42, PERM) is False

        perms.register_permission(PERM, owner="BarricadeToWall")
        assert perms.has_permission(42, PERM) is True

    def test_revoke(self):
        perms = MemoryPermissions()
        perms.register_permission(PERM, owner="BarricadeToWall")
        perms.grant(42, PERM)
        perms.revoke(42, PERM)
        assert perms.has_permission(42, PERM) is False

    def test_names_are_case_insensitive(self):
        perms = MemoryPermissions()
        perms.register_permission("BarricadeToWall.Use", owner="BarricadeToWall")
        perms.grant(42, PERM)
        assert perms.has_permission(42, "BARRICADETOWALL.USE")

    def test_registration_conflict_between_owners(self):
        perms = MemoryPermissions()
        perms.register_permission(PERM, owner="BarricadeToWall")
        perms.register_permission(PERM, owner="BarricadeToWall")
        with pytest.raises(ValueError):
            perms.register_permission(PERM, owner="Other")

    def test_unregister_by_owner(self):
        perms = MemoryPermissions()
        perms.register_permission(PERM, owner="BarricadeToWall")
        perms.register_permission("other.use", owner="Other")
        perms.unregister_permissions("BarricadeToWall")

        assert not perms.permission_exists(PERM)
        assert perms.permission_exists("other.use")


class TestLocalizer:
    def test_render_falls_back_to_english_then_key(self):
        lang = Localizer()
        lang.register_messages({"Hello": "Hello!"}, "en")

        assert lang.render("Hello", "fr") == "Hello!"
        assert lang.render("Missing", "fr") == "Missing"

    def test_render_prefers_requested_locale(self):
        lang = Localizer()
        lang.register_messages({"Hello": "Hello!"}, "en")
        lang.register_messages({"Hello": "Bonjour !"}, "fr")

        assert lang.render("Hello", "fr") == "Bonjour !"

    def test_render_formats_only_with_args(self):
        lang = Localizer()
        lang.register_messages({"Count": "You have {0} walls {{braces}}"})

        assert lang.render("Count", "en", 3) == "You have 3 walls {braces}"
        assert lang.render("Count", "en") == "You have {0} walls {{braces}}"


class TestCommandRegistry:
    def test_dispatch_routes_name_and_args(self, player):
        registry = CommandRegistry()
        calls = []
        registry.add_chat_command("barricade", "BarricadeToWall", lambda p, c, a: calls.append((p, c, a)))

        assert registry.dispatch(player, '/Barricade on "two words"') is True
        assert calls == [(player, "barricade", ["on", "two words"])]

    @pytest.mark.parametrize("text", ["barricade", "/", "/unknown", "   "])
    def test_dispatch_ignores_non_commands(self, player, text):
        registry = CommandRegistry()
        registry.add_chat_command("barricade", "BarricadeToWall", lambda p, c, a: None)
        assert registry.dispatch(player, text) is False

    def test_dispatch_tolerates_unbalanced_quotes(self, player):
        registry = CommandRegistry()
        calls = []
        registry.add_chat_command("barricade", "BarricadeToWall", lambda p, c, a: calls.append(a))

        assert registry.dispatch(player, '/barricade "oops') is True
        assert calls == [['"oops']]

    def test_invalid_and_conflicting_names(self):
        registry = CommandRegistry()
        with pytest.raises(ValueError):
            registry.add_chat_command("two words", "A", lambda p, c, a: None)
        registry.add_chat_command("wall", "A", lambda p, c, a: None)
        with pytest.raises(ValueError):
            registry.add_chat_command("WALL", "B", lambda p, c, a: None)

    def test_remove_by_owner(self):
        registry = CommandRegistry()
        registry.add_chat_command("wall", "A", lambda p, c, a: None)
        registry.add_chat_command("other", "B", lambda p, c, a: None)

        registry.remove_chat_commands("A")

        assert registry.commands() == ["other"]


def test_chat_log_records_per_player(player):
    chat = ChatLog()
    chat.send_reply(player, "one")
    chat.send_reply(Player(user_id=7), "other")
    chat.send_reply(player, "two")

    assert chat.for_player(42) == ["one", "two"]
    assert chat.last(42) == "two"
    assert chat.last(999) is None
