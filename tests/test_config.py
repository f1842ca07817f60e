from iot_timeseries.config import Config


def test_save_and_load_config(tmp_path):
    config = Config()
    config.DATA.value_column = 'humidity'
    config.CLEANING.passes = [{'method': 'device_limits', 'min': 0.0, 'max': 100.0}]
    config.RESAMPLING.frequency = '1h'
    path = tmp_path / 'config.yaml'

    config.save_config(str(path))
    loaded = Config.load_config(str(path))

    assert loaded.to_dict() == config.to_dict()


def test_partial_config_keeps_defaults(tmp_path):
    path = tmp_path / 'partial.yaml'
    path.write_text("RESAMPLING:\n  frequency: 30s\n  rule: last\n")

    loaded = Config.load_config(str(path))

    assert loaded.RESAMPLING.frequency == '30s'
    assert loaded.RESAMPLING.rule == 'last'
    assert loaded.RESAMPLING.strict_frequency is False
    assert loaded.DATA.time_column == 'time'
    assert loaded.CLEANING.clear_rejected_on_reset is False


def test_data_section_holds_input_and_export_options():
    config = Config()

    assert config.DATA.invalid_value is None
    assert config.DATA.strict_export is False
    assert 'strict_export' not in config.to_dict()['CLEANING']
