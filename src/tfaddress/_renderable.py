from typing_extensions import Protocol, runtime_checkable


@runtime_checkable
class Renderable(Protocol):
    """
    A protocol that describes the parts of an address, which can all be converted to their canonical string
    form with #render(). #Address, #ModulePath, #Module, #ResourceSpec and #Index implement it.
    """

    def render(self) -> str:
        raise NotImplementedError
