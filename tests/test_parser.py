"""
Tests for the binding declaration mini-language.
"""
import pytest

from controlbinding.binding.parser import BindingMode, BindingDescriptor, parse_binding_declaration


class TestPathToken:
    def test_path_only(self):
        descriptor = parse_binding_declaration("Path=Health")
        assert descriptor == BindingDescriptor("Health", BindingMode.ONE_WAY)

    @pytest.mark.parametrize("declaration", [
        "Path=Player.Health Mode=TwoWay",
        "Mode=TwoWay Path=Player.Health",
        "   Path=Player.Health    Mode=TwoWay  ",
        "Path=Player.Health\tMode=TwoWay\n",
    ])
    def test_order_and_whitespace_do_not_matter(self, declaration):
        descriptor = parse_binding_declaration(declaration)
        assert descriptor.property_path == "Player.Health"
        assert descriptor.mode is BindingMode.TWO_WAY

    def test_unknown_tokens_are_ignored(self):
        descriptor = parse_binding_declaration("Converter=Foo Path=Name Delay=10 Mode=OneWay")
        assert descriptor == BindingDescriptor("Name", BindingMode.ONE_WAY)

    def test_missing_path_is_not_bindable(self):
        descriptor = parse_binding_declaration("Mode=TwoWay")
        assert descriptor.property_path == ""
        assert not descriptor.is_bindable

    def test_empty_declaration(self):
        assert parse_binding_declaration("") == BindingDescriptor("", BindingMode.ONE_WAY)
        assert parse_binding_declaration(None).property_path == ""


class TestModeToken:
    @pytest.mark.parametrize("name, expected", [
        ("OneWay", BindingMode.ONE_WAY),
        ("oneway", BindingMode.ONE_WAY),
        ("TWOWAY", BindingMode.TWO_WAY),
        ("OneWayToTarget", BindingMode.ONE_WAY_TO_TARGET),
        ("onewaytotarget", BindingMode.ONE_WAY_TO_TARGET),
    ])
    def test_mode_names_are_case_insensitive(self, name, expected):
        assert parse_binding_declaration(f"Path=X Mode={name}").mode is expected

    @pytest.mark.parametrize("name", ["Sideways", "", "2Way", "One-Way"])
    def test_invalid_mode_falls_back_to_one_way_with_warning(self, name, log_records):
        descriptor = parse_binding_declaration(f"Path=X Mode={name}")

        assert descriptor.mode is BindingMode.ONE_WAY
        assert descriptor.property_path == "X"
        warnings = [r for r in log_records if r["level"].name == "WARNING"]
        assert len(warnings) == 1
        assert "Invalid binding mode" in warnings[0]["message"]

    def test_valid_mode_logs_nothing(self, log_records):
        parse_binding_declaration("Path=X Mode=TwoWay")
        assert not [r for r in log_records if r["level"].name == "WARNING"]

    def test_mode_flow_directions(self):
        assert BindingMode.ONE_WAY.pushes_to_control and not BindingMode.ONE_WAY.pushes_to_target
        assert BindingMode.ONE_WAY_TO_TARGET.pushes_to_target and not BindingMode.ONE_WAY_TO_TARGET.pushes_to_control
        assert BindingMode.TWO_WAY.pushes_to_control and BindingMode.TWO_WAY.pushes_to_target
