"""
BindingContext - owns the bindings between one view-model and a widget tree.

Responsibilities:
- read binding declarations from widget dynamic properties
- resolve dotted property paths against the view-model
- pick a binder per widget and perform the initial synchronization
- route widget changes and view-model `propertyChanged` notifications
  according to each binding's mode, with a re-entrancy guard for TwoWay
- release every subscription when a widget is unbound or destroyed

Usage:
    context = BindingContext(player_vm)
    slider.setProperty("binding_value", "Path=Health Mode=TwoWay")
    context.bind(panel)
"""
import weakref
from functools import partial
from typing import Any, Dict, List, Optional

import shiboken6
from loguru import logger
from PySide6.QtCore import QObject
from PySide6.QtWidgets import QWidget

from controlbinding.binding.binders.provider import ControlBinderProvider
from controlbinding.binding.configuration import BindingConfiguration
from controlbinding.binding.formatters import ValueFormatter
from controlbinding.binding.parser import BindingMode, parse_binding_declaration
from controlbinding.binding.path import iter_path_owners, resolve_path
from controlbinding.binding.registry import ContextRegistry, registry_for
from controlbinding.core.config import BindingSettings
from controlbinding.errors import BinderContractError, BindingError, PathResolutionError
from controlbinding.mvvm.observable_list import (
    ObservableList,
    ObservableListChangedEvent,
    ObservableListChangeType,
)


def _change_signal(source: Any):
    """The `propertyChanged` signal of a view-model object, if it has one."""
    signal = getattr(source, "propertyChanged", None)
    if signal is None or not callable(getattr(signal, "connect", None)):
        return None
    return signal


def _disconnect_all(pairs) -> None:
    for signal, slot in pairs:
        try:
            signal.disconnect(slot)
        except (RuntimeError, TypeError) as e:
            # Source already deleted on the C++ side.
            logger.debug(f"Could not disconnect {slot}: {e}")


class BindingContext(QObject):
    """
    Binds widgets to properties of `data_source`.

    Args:
        data_source: Root view-model object paths are resolved against.
        registry: Token registry shared with the controller. Defaults to the
            process-wide registry for `settings.context_property`.
        binder_provider: Binder lookup. Defaults to the built-in binders.
        settings: Declaration prefix, marker property and default mode.
    """

    def __init__(
        self,
        data_source: Any,
        registry: Optional[ContextRegistry] = None,
        binder_provider: Optional[ControlBinderProvider] = None,
        settings: Optional[BindingSettings] = None,
        parent: Optional[QObject] = None,
    ):
        super().__init__(parent)
        self._data_source = data_source
        self._settings = settings if settings is not None else BindingSettings()
        self._registry = registry if registry is not None else registry_for(self._settings.context_property)
        self._binder_provider = binder_provider if binder_provider is not None else ControlBinderProvider()
        self._default_mode = BindingMode.from_name(self._settings.default_mode) or BindingMode.ONE_WAY

        # id(widget) -> active configurations of that widget
        self._bindings: Dict[int, List[BindingConfiguration]] = {}
        # id(widget) -> slot connected to the widget's destroyed signal
        self._destroy_slots: Dict[int, Any] = {}
        # id(widget) -> widget this context bound or marked, held weakly
        self._widgets: Dict[int, weakref.ref] = {}

        self.token = self._registry.register(self)

    @property
    def data_source(self) -> Any:
        return self._data_source

    @property
    def registry(self) -> ContextRegistry:
        return self._registry

    # --- Tree binding ---

    def bind(self, widget: QWidget) -> None:
        """
        Claim `widget` for this context and bind its declarations and those
        of every descendant not claimed by a nested context.
        """
        owner = self._registry.context_for(widget)
        if owner is not None and owner is not self:
            logger.warning(f"{type(widget).__name__} '{widget.objectName()}' already belongs to another "
                           f"binding context, not rebinding")
            return

        self._registry.mark(widget, self.token)
        self._widgets[id(widget)] = weakref.ref(widget)
        self._bind_descendants(widget)

    def _bind_descendants(self, widget: QWidget) -> None:
        self.bind_from_metadata(widget)
        for child in widget.children():
            if not isinstance(child, QWidget):
                continue
            if self._registry.token_of(child):
                continue
            self._bind_descendants(child)

    def bind_from_metadata(self, widget: QWidget) -> None:
        """Bind every `<prefix><property>` declaration stored on the widget."""
        owner = self._registry.find_ancestor_context(widget)
        if owner is not None and owner is not self:
            return

        prefix = self._settings.meta_prefix
        for raw_name in widget.dynamicPropertyNames():
            name = raw_name.data().decode()
            if not name.startswith(prefix):
                continue

            declaration = widget.property(name)
            descriptor = parse_binding_declaration(str(declaration or ""), self._default_mode)
            control_property = name[len(prefix):]
            if not descriptor.is_bindable:
                logger.warning(f"Binding '{name}' on {type(widget).__name__} has no Path, skipped")
                continue

            self.bind_property(widget, control_property, descriptor.property_path, descriptor.mode)

    # --- Single property binding ---

    def bind_property(
        self,
        widget: QWidget,
        control_property: str,
        property_path: str,
        mode: BindingMode = BindingMode.ONE_WAY,
        formatter: Optional[ValueFormatter] = None,
    ) -> Optional[BindingConfiguration]:
        """
        Bind `widget.<control_property>` to `<data_source>.<property_path>`.

        Returns the configuration, or None when the binding was skipped.
        Configuration problems are logged, never raised.
        """
        if not property_path:
            logger.warning(f"Empty property path for {type(widget).__name__}.{control_property}, skipped")
            return None

        owner = self._registry.find_ancestor_context(widget)
        if owner is not None and owner is not self:
            logger.warning(f"{type(widget).__name__} is bound to another context, "
                           f"'{control_property}' not bound")
            return None

        key = id(widget)
        self._purge_dead(key)
        for existing in self._bindings.get(key, []):
            if existing.bound_property_name == control_property:
                logger.debug(f"{type(widget).__name__}.{control_property} already bound to '{existing.property_path}'")
                return existing

        try:
            accessor = resolve_path(self._data_source, property_path, writable=mode.pushes_to_target)
        except PathResolutionError as e:
            logger.error(f"Binding {type(widget).__name__}.{control_property} skipped: {e}")
            return None

        binder = self._binder_provider.get_binder(widget)
        if binder is None:
            logger.error(f"Binding {type(widget).__name__}.{control_property} skipped: no binder")
            return None

        config = BindingConfiguration(widget, control_property, property_path, mode, formatter, accessor.owner)
        config.accessor = accessor
        config.binder = binder

        try:
            self._attach(config)
        except BindingError as e:
            logger.error(f"Binding {type(widget).__name__}.{control_property} skipped: {e}")
            self._release(config)
            return None
        except BinderContractError:
            self._release(config)
            raise

        self._bindings.setdefault(key, []).append(config)
        self._widgets[key] = weakref.ref(widget)
        self._watch_destroyed(widget, key)
        logger.debug(f"Bound {type(widget).__name__}.{control_property} to '{property_path}' ({mode.value})")
        return config

    def _attach(self, config: BindingConfiguration) -> None:
        binder = config.binder
        binder.bind_control(config)

        slot = partial(self._on_control_value_changed, config)
        binder.controlValueChanged.connect(slot)
        config.subscriptions.append((binder.controlValueChanged, slot))

        self._watch_path(config)
        self._sync_from_source(config)

    # --- Unbinding ---

    def unbind(self, widget: QWidget) -> None:
        """Remove every binding of `widget`; later widget events write nothing."""
        key = id(widget)
        for config in self._bindings.pop(key, []):
            self._release(config)
        self._widgets.pop(key, None)

        slot = self._destroy_slots.pop(key, None)
        if slot is not None:
            _disconnect_all([(widget.destroyed, slot)])

        if self._registry.token_of(widget) == self.token:
            self._registry.unmark(widget)

    def dispose(self) -> None:
        """Unbind every widget, remove this context's markers and drop it from the registry."""
        for ref in list(self._widgets.values()):
            widget = ref()
            if widget is not None and shiboken6.isValid(widget):
                self.unbind(widget)
        for key in list(self._bindings):
            for config in self._bindings.pop(key):
                self._release(config)
        self._widgets.clear()
        self._destroy_slots.clear()
        self._registry.unregister(self.token)

    def bindings_for(self, widget: QWidget) -> List[BindingConfiguration]:
        return [c for c in self._bindings.get(id(widget), []) if c.is_alive]

    def is_bound(self, widget: QWidget) -> bool:
        return bool(self.bindings_for(widget))

    def active_bindings(self) -> List[BindingConfiguration]:
        return [c for configs in self._bindings.values() for c in configs if c.is_alive]

    def _release(self, config: BindingConfiguration) -> None:
        config.is_released = True
        if config.binder is not None:
            config.binder.clear_event_bindings()
        _disconnect_all(config.subscriptions)
        config.subscriptions.clear()
        self._detach_list(config)

    def _purge_dead(self, key: int) -> None:
        configs = self._bindings.get(key)
        if not configs:
            return
        alive = []
        for config in configs:
            if config.is_alive:
                alive.append(config)
            else:
                self._release(config)
        if alive:
            self._bindings[key] = alive
        else:
            del self._bindings[key]

    def _watch_destroyed(self, widget: QWidget, key: int) -> None:
        if key in self._destroy_slots:
            return
        slot = partial(self._on_control_destroyed, key)
        widget.destroyed.connect(slot)
        self._destroy_slots[key] = slot

    def _on_control_destroyed(self, key: int, *_args) -> None:
        self._destroy_slots.pop(key, None)
        self._widgets.pop(key, None)
        for config in self._bindings.pop(key, []):
            self._release(config)
        logger.debug("Bound widget destroyed, bindings released")

    def _ensure_alive(self, config: BindingConfiguration) -> bool:
        if config.is_released:
            return False
        if config.is_alive:
            return True
        for key, configs in list(self._bindings.items()):
            if config in configs:
                self._purge_dead(key)
                break
        return False

    # --- View-model -> widget ---

    def _watch_path(self, config: BindingConfiguration) -> None:
        for owner, segment, is_terminal in iter_path_owners(self._data_source, config.property_path):
            signal = _change_signal(owner)
            if signal is None:
                continue
            slot = partial(self._on_source_changed, config, segment, is_terminal)
            signal.connect(slot)
            config.subscriptions.append((signal, slot))

    def _unwatch_path(self, config: BindingConfiguration) -> None:
        keep = []
        dropped = []
        for signal, slot in config.subscriptions:
            if isinstance(slot, partial) and slot.func == self._on_source_changed:
                dropped.append((signal, slot))
            else:
                keep.append((signal, slot))
        _disconnect_all(dropped)
        config.subscriptions[:] = keep

    def _on_source_changed(self, config: BindingConfiguration, segment: str, is_terminal: bool,
                           property_name: str, _value: Any = None) -> None:
        if property_name != segment:
            return
        if not self._ensure_alive(config):
            return

        try:
            if is_terminal:
                if config.is_updating:
                    return
                self._detach_list(config)
                self._sync_from_source(config)
            else:
                self._reresolve(config)
        except BindingError as e:
            logger.error(f"Could not update {config}: {e}")

    def _reresolve(self, config: BindingConfiguration) -> None:
        """An intermediate object on the path was replaced."""
        self._unwatch_path(config)
        self._detach_list(config)
        try:
            config.accessor = resolve_path(self._data_source, config.property_path,
                                           writable=config.binding_mode.pushes_to_target)
        except PathResolutionError as e:
            config.accessor = None
            logger.debug(f"{config} suspended until its path resolves again: {e}")
        self._watch_path(config)
        self._sync_from_source(config)

    def _sync_from_source(self, config: BindingConfiguration) -> None:
        accessor = config.accessor
        if accessor is None:
            return
        value = accessor.get()
        if isinstance(value, ObservableList):
            config.target_object = value
            self._attach_list(config)
            return

        was_list = config.is_list_binding
        config.target_object = accessor.owner
        if was_list:
            # The list was replaced by a non-list value; show nothing.
            config.binder.on_observable_list_changed(
                ObservableListChangedEvent(ObservableListChangeType.CLEAR))
            return
        if config.binding_mode.pushes_to_control:
            self._push_to_control(config, value)

    def _push_to_control(self, config: BindingConfiguration, value: Any) -> None:
        if config.bound_control is None:
            return
        if config.formatter is not None:
            value = config.formatter.format_control(value)

        config.is_updating = True
        try:
            config.binder.set_control_value(value)
        finally:
            config.is_updating = False

    # --- Observable lists ---

    def _attach_list(self, config: BindingConfiguration) -> None:
        if not config.binding_mode.pushes_to_control:
            return
        observable: ObservableList = config.target_object
        for signal, slot in ((observable.listChanged, partial(self._on_list_changed, config)),
                             (observable.itemChanged, partial(self._on_list_item_changed, config))):
            signal.connect(slot)
            config.list_subscriptions.append((signal, slot))

        binder = config.binder
        binder.on_observable_list_changed(ObservableListChangedEvent(ObservableListChangeType.CLEAR))
        entries = tuple(observable.backing_list())
        if entries:
            binder.on_observable_list_changed(
                ObservableListChangedEvent(ObservableListChangeType.ADD, entries, 0))

    def _detach_list(self, config: BindingConfiguration) -> None:
        _disconnect_all(config.list_subscriptions)
        config.list_subscriptions.clear()

    def _on_list_changed(self, config: BindingConfiguration, event: ObservableListChangedEvent) -> None:
        if not self._ensure_alive(config):
            return
        try:
            config.binder.on_observable_list_changed(event)
        except BindingError as e:
            logger.error(f"Could not apply list change to {config}: {e}")

    def _on_list_item_changed(self, config: BindingConfiguration, entry: Any) -> None:
        if not self._ensure_alive(config):
            return
        try:
            config.binder.on_list_item_changed(entry)
        except BindingError as e:
            logger.error(f"Could not refresh list entry for {config}: {e}")

    # --- Widget -> view-model ---

    def _on_control_value_changed(self, config: BindingConfiguration, _control: Any, property_name: str) -> None:
        if property_name != config.bound_property_name:
            return
        if not config.binding_mode.pushes_to_target or config.is_updating:
            return
        if not self._ensure_alive(config) or config.accessor is None:
            return

        value = config.binder.get_control_value()
        try:
            if config.formatter is not None:
                value = config.formatter.format_target(value)
        except BindingError as e:
            logger.error(f"Could not write back {config}: {e}")
            return

        config.is_updating = True
        try:
            config.accessor.set(value)
        finally:
            config.is_updating = False
