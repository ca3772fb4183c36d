"""
Xavier initializer task descriptor.

The descriptor gathers the references a Xavier fill kernel needs (random
engine, layer and target tensor) from the initializer's parameter and
result. Building it draws no random numbers and computes no scale; it is
only an adapter that decouples the parameter/result layout from the fill
kernel, which may vary per CPU.

Lifetime
--------
The descriptor holds plain references and owns nothing. It must not
outlive the parameter and result it was built from; build a fresh one per
initialization request and discard it once the kernel has consumed it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from ....domain._initializer import ILayer, IRandomEngine
from ....domain._status import ErrorId, Status
from ....utils import get_logger, log_context
from ...tensor import HomogenTensor
from ._types import InitializerResult, InitializerResultId, XavierParameter

logger = get_logger(__name__)


@dataclass(frozen=True, eq=False)
class XavierInitializerTaskDescriptor:
    """
    Non-owning bundle of the objects a Xavier fill kernel consumes.

    Attributes
    ----------
    engine : IRandomEngine
        The parameter's engine (same object).
    layer : ILayer
        The parameter's layer (same object).
    result : HomogenTensor
        The result's target tensor (same object).
    """

    engine: IRandomEngine
    layer: ILayer
    result: HomogenTensor

    @classmethod
    def create(
        cls, result: Optional[InitializerResult], parameter: Optional[XavierParameter]
    ) -> "XavierInitializerTaskDescriptor":
        """
        Build a descriptor, raising instead of returning a status.

        Raises
        ------
        KeyAnalyticsError
            `NullParameterError`, `NullEngineOrLayerError` or
            `MissingTargetTensorError`.
        """
        descriptor, status = build_xavier_task_descriptor(result, parameter)
        status.raise_for_status()
        return descriptor


def build_xavier_task_descriptor(
    result: Optional[InitializerResult], parameter: Optional[XavierParameter]
) -> Tuple[Optional[XavierInitializerTaskDescriptor], Status]:
    """
    Assemble a Xavier task descriptor from an initializer result and parameter.

    Parameters
    ----------
    result : Optional[InitializerResult]
        Must hold the target tensor under `InitializerResultId.VALUE`.
    parameter : Optional[XavierParameter]
        Must carry a random engine and a layer.

    Returns
    -------
    tuple[Optional[XavierInitializerTaskDescriptor], Status]
        The descriptor and an empty status on success; `None` and a status
        listing `NullParameter`, `NullEngineOrLayer` and/or
        `MissingTargetTensor` otherwise.
    """
    status = Status()
    if parameter is None:
        status.add(ErrorId.NULL_PARAMETER, "xavier parameter is not set")
    else:
        if parameter.engine is None:
            status.add(ErrorId.NULL_ENGINE_OR_LAYER, "random engine is not set")
        if parameter.layer is None:
            status.add(ErrorId.NULL_ENGINE_OR_LAYER, "layer is not set")

    target = None if result is None else result.get(InitializerResultId.VALUE)
    if target is None:
        status.add(ErrorId.MISSING_TARGET_TENSOR, "result has no 'value' tensor")

    with log_context(algorithm="xavier_initializer"):
        if not status:
            logger.warning(
                "xavier_descriptor_failed", errors=[e.value for e in status.errors]
            )
            return None, status

        logger.debug(
            "xavier_descriptor_built",
            layer=getattr(parameter.layer, "name", "") or type(parameter.layer).__name__,
            target_shape=getattr(target, "shape", None),
        )
    return (
        XavierInitializerTaskDescriptor(
            engine=parameter.engine, layer=parameter.layer, result=target
        ),
        status,
    )
