"""Tools related to dgkernel configuration"""

import logging
from pathlib import Path
from typing import Mapping
import yaml

from expression import Option, Result
from numpydoc_decorator import doc

from dgkernel import COMPONENT_TYPE_KEY, DEFAULT_NORM_KEY, DIMENSION_KEY, ConfigurationValueError, unsafe_extract_result
from dgkernel.point_vector import NormType, PointVector
from dgkernel.scalar_traits import SCALAR_TYPES_BY_NAME


@doc(
    summary="Resolve the name of a scalar type with a traits specialization",
    parameters=dict(name="Name of the scalar type, e.g. 'int32' or 'float64'"),
    returns="Either the named type, or an error message",
)
def parse_component_type(name: str) -> Result[type, str]:
    return Option.of_optional(SCALAR_TYPES_BY_NAME.get(name))\
        .to_result(f"Unknown component type: {name}; choose from {', '.join(SCALAR_TYPES_BY_NAME)}")


def get_point_vector_type(conf_data: Mapping[str, object]) -> Result[type[PointVector], ConfigurationValueError]:
    """Get the point/vector type with the configured component type and dimension."""
    return _get_component_type(conf_data)\
        .bind(lambda t: _get_dimension(conf_data).map(lambda n: (t, n)))\
        .map(lambda t_n: PointVector[t_n[0], t_n[1]])\
        .map_error(lambda msg: ConfigurationValueError(msg))


def get_point_vector_type_unsafe(conf_data: Mapping[str, object]) -> type[PointVector]:
    return unsafe_extract_result(get_point_vector_type(conf_data))


def get_default_norm_type(conf_data: Mapping[str, object]) -> NormType:
    """Get the configured default norm, Euclidean if absent."""
    match conf_data.get(DEFAULT_NORM_KEY):
        case None:
            return NormType.L_2
        case str(name):
            return unsafe_extract_result(
                NormType.parse_exact(name)
                .to_result(f"Illegal value for default norm ('{DEFAULT_NORM_KEY}'): {name}")
                .map_error(ConfigurationValueError)
            )
        case obj:
            raise ConfigurationValueError(
                f"Default norm ('{DEFAULT_NORM_KEY}') has value of illegal type: {type(obj).__name__}"
            )


def read_kernel_configuration_file(config_file: Path) -> Mapping[str, object]:
    """Parse a dgkernel configuration file from YAML."""
    logging.info("Reading dgkernel configuration file: %s", config_file)
    with open(config_file, "r") as fh:
        return yaml.safe_load(fh)


def _get_component_type(conf_data: Mapping[str, object]) -> Result[type, str]:
    match conf_data.get(COMPONENT_TYPE_KEY):
        case None:
            return Result.Error(f"Configuration is missing key for component type: {COMPONENT_TYPE_KEY}")
        case str(name):
            return parse_component_type(name)
        case obj:
            return Result.Error(f"Component type ('{COMPONENT_TYPE_KEY}') has value of illegal type: {type(obj).__name__}")


def _get_dimension(conf_data: Mapping[str, object]) -> Result[int, str]:
    match conf_data.get(DIMENSION_KEY):
        case None:
            return Result.Error(f"Configuration is missing key for dimension: {DIMENSION_KEY}")
        case bool(obj):
            return Result.Error(f"Dimension ('{DIMENSION_KEY}') has value of illegal type: {type(obj).__name__}")
        case int(n) if n >= 1:
            return Result.Ok(n)
        case int(n):
            return Result.Error(f"Dimension ('{DIMENSION_KEY}') must be positive: {n}")
        case obj:
            return Result.Error(f"Dimension ('{DIMENSION_KEY}') has value of illegal type: {type(obj).__name__}")