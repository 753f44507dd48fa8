"""
Unit Tests for BindableProperty / BindableBase.
"""
from unittest.mock import MagicMock
from PySide6.QtCore import Signal

from controlbinding.mvvm.bindable import BindableProperty, BindableBase


class TestBindableProperty:
    """Tests for BindableProperty descriptor."""

    def test_default_value(self, qapp):
        class TestVM(BindableBase):
            name = BindableProperty(default="default_name")

        vm = TestVM()
        assert vm.name == "default_name"

    def test_emits_property_changed(self, qapp):
        class TestVM(BindableBase):
            count = BindableProperty(default=0)

        vm = TestVM()
        callback = MagicMock()
        vm.propertyChanged.connect(callback)

        vm.count = 42

        callback.assert_called_once_with("count", 42)

    def test_emits_specific_signal(self, qapp):
        class TestVM(BindableBase):
            countChanged = Signal(int)
            count = BindableProperty(default=0)

        vm = TestVM()
        callback = MagicMock()
        vm.countChanged.connect(callback)

        vm.count = 100

        callback.assert_called_once_with(100)

    def test_no_emit_on_same_value(self, qapp):
        class TestVM(BindableBase):
            name = BindableProperty(default="same")

        vm = TestVM()
        callback = MagicMock()
        vm.propertyChanged.connect(callback)

        vm.name = "same"

        callback.assert_not_called()

    def test_coerce_function(self, qapp):
        class TestVM(BindableBase):
            age = BindableProperty(default=0, coerce=lambda x: max(0, int(x)))

        vm = TestVM()
        vm.age = -5
        assert vm.age == 0

        vm.age = "25"
        assert vm.age == 25

    def test_manual_notification(self, qapp):
        class TestVM(BindableBase):
            pass

        vm = TestVM()
        callback = MagicMock()
        vm.propertyChanged.connect(callback)

        vm.notify_property_changed("computed", 3)

        callback.assert_called_once_with("computed", 3)
