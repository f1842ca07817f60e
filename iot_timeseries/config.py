from pathlib import Path
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional
import yaml


@dataclass
class DataConfig:
    """Data configuration parameters"""
    data_path: Optional[str] = None
    output_dir: str = 'output'
    time_column: str = 'time'
    value_column: str = 'temperature'
    invalid_value: Optional[float] = None
    strict_export: bool = False


@dataclass
class CleaningConfig:
    """Cleaning passes, applied in order on the cleaned series"""
    passes: List[Dict[str, Any]] = field(default_factory=list)
    clear_rejected_on_reset: bool = False


@dataclass
class ResamplingConfig:
    """Resampling configuration parameters"""
    frequency: str = '15m'
    rule: str = 'avg'
    strict_frequency: bool = False


@dataclass
class LoggingConfig:
    """Logging configuration parameters"""
    log_dir: str = 'logs'
    log_file: str = 'iot_timeseries.log'
    level: str = 'INFO'


class Config:
    def __init__(self):
        self.DATA = DataConfig()
        self.CLEANING = CleaningConfig(passes=[
            {'method': 'percentile', 'percentile': 0.01},
        ])
        self.RESAMPLING = ResamplingConfig()
        self.LOGGING = LoggingConfig()

    def to_dict(self) -> Dict[str, Any]:
        return {
            'DATA': asdict(self.DATA),
            'CLEANING': asdict(self.CLEANING),
            'RESAMPLING': asdict(self.RESAMPLING),
            'LOGGING': asdict(self.LOGGING),
        }

    def save_config(self, path: str):
        """Save configuration to YAML file"""
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w') as f:
            yaml.safe_dump(self.to_dict(), f, sort_keys=False)

    @classmethod
    def load_config(cls, path: str) -> 'Config':
        """Load a YAML file; missing sections keep their defaults"""
        with open(path, 'r') as f:
            config_dict = yaml.safe_load(f) or {}

        config = cls()
        if 'DATA' in config_dict:
            config.DATA = DataConfig(**config_dict['DATA'])
        if 'CLEANING' in config_dict:
            config.CLEANING = CleaningConfig(**config_dict['CLEANING'])
        if 'RESAMPLING' in config_dict:
            config.RESAMPLING = ResamplingConfig(**config_dict['RESAMPLING'])
        if 'LOGGING' in config_dict:
            config.LOGGING = LoggingConfig(**config_dict['LOGGING'])

        return config
