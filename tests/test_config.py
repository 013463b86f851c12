import pytest

from dump_config import DumpConfig
from dump_errors import DumpError, InvalidConfiguration


def test_defaults():
    cfg = DumpConfig()
    assert cfg.control_pictures is False
    assert cfg.line_count is None
    assert cfg.line_width == 16
    assert cfg.byte_group_length == 1
    assert cfg.byte_limit is None


def test_setters_chain_and_leave_original_untouched():
    base = DumpConfig()
    cfg = (base
           .with_control_pictures(True)
           .with_line_count(3)
           .with_line_width(8)
           .with_byte_group_length(2))
    assert cfg == DumpConfig(control_pictures=True, line_count=3,
                             line_width=8, byte_group_length=2)
    assert cfg.byte_limit == 24
    assert base == DumpConfig()


def test_boundary_widths_accepted():
    assert DumpConfig().with_line_width(1).line_width == 1
    assert DumpConfig().with_line_width(256).line_width == 256
    assert DumpConfig().with_byte_group_length(256).byte_group_length == 256
    assert DumpConfig().with_line_count(0).line_count == 0
    assert DumpConfig(line_count=5).with_line_count(None).line_count is None


@pytest.mark.parametrize('value', [0, 257, -1, 1000])
def test_line_width_out_of_range(value):
    with pytest.raises(InvalidConfiguration) as excinfo:
        DumpConfig().with_line_width(value)
    assert excinfo.value.option == 'line_width'
    assert excinfo.value.value == value
    assert str(value) in str(excinfo.value)


@pytest.mark.parametrize('value', [0, 257])
def test_byte_group_length_out_of_range(value):
    with pytest.raises(InvalidConfiguration) as excinfo:
        DumpConfig().with_byte_group_length(value)
    assert excinfo.value.option == 'byte_group_length'
    assert excinfo.value.value == value


def test_direct_construction_is_validated():
    with pytest.raises(InvalidConfiguration):
        DumpConfig(line_width=0)
    with pytest.raises(InvalidConfiguration):
        DumpConfig(byte_group_length=300)
    with pytest.raises(InvalidConfiguration):
        DumpConfig(line_count=-2)


def test_non_integer_values_rejected():
    with pytest.raises(InvalidConfiguration):
        DumpConfig().with_line_width(16.0)
    with pytest.raises(InvalidConfiguration):
        DumpConfig().with_line_width(True)
    with pytest.raises(InvalidConfiguration):
        DumpConfig().with_line_count('3')


def test_invalid_configuration_is_value_error():
    with pytest.raises(ValueError):
        DumpConfig().with_line_width(0)
    assert issubclass(InvalidConfiguration, DumpError)


def test_config_is_frozen():
    cfg = DumpConfig()
    with pytest.raises(AttributeError):
        cfg.line_width = 8
