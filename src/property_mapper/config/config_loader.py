import logging
from pathlib import Path
from typing import Type, TypeVar, Union

import yaml
from pydantic import BaseModel

# Generic type variable bounded by BaseModel
T = TypeVar('T', bound=BaseModel)

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = {".yaml", ".yml"}


class ConfigLoader:
    @staticmethod
    def get_config(config_class: Type[T], path: Union[str, Path]) -> T:
        """
        Parse a JSON or YAML file into the given configuration class.

        Args:
            config_class: The concrete configuration class to instantiate
            path: Path to a .json, .yaml or .yml file

        Returns:
            Instance of the specified configuration class

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file extension is not supported

        Example:
            config = ConfigLoader.get_config(PropertyMapperConfig, "config/application.yaml")
        """
        config_path = Path(path)
        if not config_path.is_file():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        suffix = config_path.suffix.lower()
        logger.info(f"Loading {config_class.__name__} from {config_path}")

        with open(config_path) as f:
            if suffix == ".json":
                return config_class.model_validate_json(f.read())
            if suffix in _YAML_SUFFIXES:
                return config_class.model_validate(yaml.safe_load(f) or {})

        raise ValueError(f"Unsupported configuration file type '{suffix}': {config_path}")
