from typing import Any, List, Optional

from .parameters import Parameter


class Arguments:
    """Values produced by a successful ``parse``, indexed by parameter handle.

    Slot 0 holds the program name; every other slot belongs to the parameter
    whose handle carries that index. Absent parameters read as ``None``, or
    as an empty list for incremental parameters.
    """

    def __init__(self, slots: List[Any]):
        self._slots = slots

    @property
    def program_name(self) -> Optional[str]:
        return self._slots[0]

    def argv_0(self) -> Optional[str]:
        return self.program_name

    def __getitem__(self, parameter: Parameter) -> Any:
        if parameter.index <= 0:
            raise IndexError(f"Not a parameter slot: {parameter.index}")
        slot = self._slots[parameter.index]
        if parameter.value.is_container:
            return list(slot) if slot is not None else []
        return slot

    def has_value(self, parameter: Parameter) -> bool:
        if parameter.index <= 0:
            raise IndexError(f"Not a parameter slot: {parameter.index}")
        return self._slots[parameter.index] is not None

    def get(self, parameter: Parameter, default: Any = None) -> Any:
        if not self.has_value(parameter):
            return default
        return self[parameter]

    def __len__(self) -> int:
        return len(self._slots) - 1
