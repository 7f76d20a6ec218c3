"""
View routing and page composition.

Guards against:
1. Unknown fragments rendering anything but the dashboard
2. The router validating (and rewriting) the stored identifier
3. Empty fragments clobbering the current view
4. Listeners leaking after the page is torn down
"""
import pytest

from statasphere.views.composer import NAV_ITEMS, VIEW_TEMPLATES, View, compose, sidebar_items
from statasphere.views.router import DEFAULT_VIEW, FragmentEvents, ViewRouter, fragment_of


# ────────────────────────────────────────────
# PAGE COMPOSER
# ────────────────────────────────────────────


class TestCompose:

    @pytest.mark.parametrize("identifier,template", [
        ("diagnose", "views/diagnose.html"),
        ("optimize", "views/optimize.html"),
        ("impact", "views/impact.html"),
        ("dashboard", "views/dashboard.html"),
    ])
    def test_known_views(self, identifier, template):
        assert compose(identifier) == template

    @pytest.mark.parametrize("identifier", [
        "", "products", "Diagnose", "diagnose ", "#diagnose", "impact/details", None,
    ])
    def test_unknown_identifiers_fall_back_to_dashboard(self, identifier):
        assert compose(identifier) == "views/dashboard.html"
        assert View.resolve(identifier) is View.DASHBOARD

    def test_every_view_has_a_template(self):
        assert set(VIEW_TEMPLATES) == set(View)


class TestSidebar:

    def test_items_link_to_fragments(self):
        items = sidebar_items("dashboard")
        assert [i["url"] for i in items] == ["#dashboard", "#diagnose", "#optimize", "#impact"]
        assert len(items) == len(NAV_ITEMS)

    def test_only_active_view_is_highlighted(self):
        active = [i["view"] for i in sidebar_items("optimize") if i["is_active"]]
        assert active == ["optimize"]

    def test_unknown_view_highlights_nothing(self):
        """The dashboard renders, but the stored identifier matches no entry."""
        assert not any(i["is_active"] for i in sidebar_items("nonsense"))


# ────────────────────────────────────────────
# VIEW ROUTER
# ────────────────────────────────────────────


class TestFragmentOf:

    def test_text_after_hash(self):
        assert fragment_of("https://app.example.com/#diagnose") == "diagnose"

    def test_no_hash(self):
        assert fragment_of("https://app.example.com/") == ""

    def test_bare_hash(self):
        assert fragment_of("https://app.example.com/#") == ""

    def test_only_first_hash_splits(self):
        assert fragment_of("/#impact#top") == "impact#top"


class TestViewRouter:

    def test_default_is_dashboard(self):
        router = ViewRouter()
        router.mount("https://app.example.com/")
        assert router.active_view == DEFAULT_VIEW == "dashboard"

    def test_mount_reads_fragment(self):
        router = ViewRouter()
        router.mount("https://app.example.com/#impact")
        assert router.active_view == "impact"

    def test_unknown_fragment_is_stored_verbatim(self):
        router = ViewRouter()
        router.mount("/#reports-2024")
        assert router.active_view == "reports-2024"
        assert compose(router.active_view) == "views/dashboard.html"

    def test_follows_fragment_changes_synchronously(self):
        events = FragmentEvents()
        router = ViewRouter()
        router.mount("/", events)

        events.emit("/#diagnose")
        assert router.active_view == "diagnose"
        events.emit("/#optimize")
        assert router.active_view == "optimize"

    def test_empty_fragment_keeps_current_view(self):
        events = FragmentEvents()
        router = ViewRouter()
        router.mount("/#impact", events)

        events.emit("/")
        assert router.active_view == "impact"

    def test_setter(self):
        router = ViewRouter()
        router.set_active_view("diagnose")
        assert router.active_view == "diagnose"

    def test_unmount_unsubscribes(self):
        events = FragmentEvents()
        router = ViewRouter()
        router.mount("/", events)
        assert events.listener_count == 1
        assert router.mounted

        router.unmount()
        assert events.listener_count == 0
        assert not router.mounted

        events.emit("/#impact")
        assert router.active_view == "dashboard"

    def test_unmount_without_mount_is_noop(self):
        ViewRouter().unmount()
