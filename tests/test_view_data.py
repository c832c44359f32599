"""
Tests for ViewDataDictionary, ModelStateDictionary and DynamicViewData.
"""

import pytest

from page_widgets.errors import WidgetError
from page_widgets.view_data import DynamicViewData, ModelStateDictionary, ViewDataDictionary


class TestViewDataDictionary:
    def test_later_writes_overwrite(self):
        vd = ViewDataDictionary()
        vd["a"] = 1
        vd["a"] = 2

        assert vd["a"] == 2
        assert len(vd) == 1

    def test_derive_copies_entries(self):
        parent = ViewDataDictionary(model="parent")
        parent["title"] = "Home"

        child = ViewDataDictionary(parent, model="child")
        child["title"] = "Changed"
        child["extra"] = True

        assert parent["title"] == "Home"
        assert "extra" not in parent
        assert child.model == "child"
        assert parent.model == "parent"

    def test_derive_without_model_has_none(self):
        parent = ViewDataDictionary(model="parent")

        assert ViewDataDictionary(parent).model is None

    def test_derive_shares_model_state(self):
        parent = ViewDataDictionary()
        child = ViewDataDictionary(parent)

        child.model_state.add_model_error("name", "required")

        assert parent.model_state.errors("name") == ["required"]

    def test_fresh_dictionary_has_own_model_state(self):
        assert ViewDataDictionary().model_state is not ViewDataDictionary().model_state


class TestModelStateDictionary:
    def test_validity(self):
        ms = ModelStateDictionary()
        assert ms.is_valid

        ms.add_model_error("email", "invalid")
        ms.add_model_error("email", "taken")

        assert not ms.is_valid
        assert ms.errors("email") == ["invalid", "taken"]
        assert ms.errors("missing") == []
        assert "email" in ms

        ms.clear()
        assert ms.is_valid
        assert len(ms) == 0


class TestDynamicViewData:
    def test_attribute_and_item_access(self):
        vd = ViewDataDictionary()
        bag = DynamicViewData(lambda: vd)

        bag.title = "x"
        bag["count"] = 3

        assert vd == {"title": "x", "count": 3}
        assert bag.title == "x"
        assert bag["count"] == 3
        assert bag.get("missing", "fallback") == "fallback"
        assert bag.missing is None
        assert "title" in bag

    def test_delete_attribute(self):
        vd = ViewDataDictionary()
        bag = DynamicViewData(lambda: vd)
        bag.title = "x"

        del bag.title

        assert "title" not in vd

    def test_always_uses_current_dictionary(self):
        holder = {"vd": ViewDataDictionary()}
        bag = DynamicViewData(lambda: holder["vd"])
        bag.a = 1

        holder["vd"] = ViewDataDictionary()

        assert bag.a is None
        bag.b = 2
        assert holder["vd"]["b"] == 2

    def test_without_dictionary(self):
        bag = DynamicViewData(lambda: None)

        assert bag.anything is None
        assert "anything" not in bag
        assert dir(bag) == []
        with pytest.raises(WidgetError):
            bag.title = "x"

    def test_dunder_lookups_are_not_view_data(self):
        bag = DynamicViewData(lambda: ViewDataDictionary())

        assert not hasattr(bag, "__html__")
