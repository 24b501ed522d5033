from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from ._index import ABSENT, Index, IntegerIndex, TextIndex


class ResourceMode(str, enum.Enum):
    """The kind of object an address points to."""

    MANAGED = "managed"
    DATA = "data"


def _with_index(prefix: str, index: Index) -> str:
    rendered = index.render()
    if rendered:
        return f"{prefix}[{rendered}]"
    return prefix


@dataclass(frozen=True)
class Module:
    """
    A module component of an address, `module.<name>` optionally followed by an index.

        >>> Module("network").render()
        'module.network'
        >>> Module("network", Index.of("eu")).render()
        'module.network["eu"]'
    """

    name: str
    index: Index = ABSENT

    def render(self) -> str:
        return _with_index(f"module.{self.name}", self.index)

    def __str__(self) -> str:
        return self.render()


class ModulePath(list[Module]):
    """
    The list of modules in an address. The outer-most module (furthest to the left in the address) is at index 0.
    A module path can be empty, which is the case for resources in the root module.

        >>> ModulePath([Module("a", Index.of(0)), Module("b")]).render()
        'module.a[0].module.b'
    """

    def render(self) -> str:
        return ".".join(module.render() for module in self)

    def copy(self) -> ModulePath:
        return ModulePath(self)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"ModulePath({list(self)!r})"


@dataclass(frozen=True)
class ResourceSpec:
    """
    The resource component of an address, `<type>.<name>` optionally followed by an index.
    """

    type: str
    name: str
    index: Index = ABSENT

    def render(self) -> str:
        return _with_index(f"{self.type}.{self.name}", self.index)

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class Address:
    """
    The parsed form of a Terraform resource address: an optional module path, an optional `data.` marker and the
    resource spec.

        >>> address = Address.parse("module.foo[1].data.aws_ami.ubuntu")
        >>> address.module_path
        ModulePath([Module(name='foo', index=IntegerIndex(value=1))])
        >>> address.mode
        <ResourceMode.DATA: 'data'>
        >>> address.resource_spec
        ResourceSpec(type='aws_ami', name='ubuntu', index=AbsentIndex())
        >>> address
        Address('module.foo[1].data.aws_ami.ubuntu')

    Addresses are compared by value. Use #clone() to get a copy with an independent #module_path that can be
    modified without affecting the original.
    """

    module_path: ModulePath
    resource_spec: ResourceSpec
    mode: ResourceMode = ResourceMode.MANAGED

    def __post_init__(self) -> None:
        if not isinstance(self.module_path, ModulePath):
            object.__setattr__(self, "module_path", ModulePath(self.module_path))
        object.__setattr__(self, "mode", ResourceMode(self.mode))

    @staticmethod
    def parse(text: str) -> Address:
        """
        Parse an address. Raises a #ParseError if *text* is not a valid address.

            >>> Address.parse("aws_instance.web[0]").resource_spec.index
            IntegerIndex(value=0)
        """

        from ._parser import parse_address

        return parse_address(text)

    def is_data(self) -> bool:
        return self.mode == ResourceMode.DATA

    def render(self) -> str:
        """
        Returns the canonical string form of the address. Parsing the result yields an equal address.

            >>> Address([Module("foo")], ResourceSpec("aws_s3_bucket", "logs", Index.of("a\\\\b"))).render()
            'module.foo.aws_s3_bucket.logs["a\\\\\\\\b"]'
        """

        prefix = ""
        if self.module_path:
            prefix = self.module_path.render() + "."
        if self.mode == ResourceMode.DATA:
            prefix += "data."
        return prefix + self.resource_spec.render()

    def clone(self) -> Address:
        """
        Returns a copy of the address. The copy has its own #module_path.

            >>> address = Address.parse("module.a.null_resource.x")
            >>> clone = address.clone()
            >>> clone.module_path.append(Module("b"))
            >>> str(clone), str(address)
            ('module.a.module.b.null_resource.x', 'module.a.null_resource.x')
        """

        return Address(self.module_path.copy(), self.resource_spec, self.mode)

    def __copy__(self) -> Address:
        return self.clone()

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Address({self.render()!r})"

    def __hash__(self) -> int:
        return hash((Address, tuple(self.module_path), self.resource_spec, self.mode))

    def to_json(self) -> dict[str, Any]:
        """
        Converts the address to a JSON compatible structure. An absent index is represented as `None`.

            >>> Address.parse('module.a["x"].aws_vpc.main').to_json()  # doctest: +NORMALIZE_WHITESPACE
            {'module_path': [{'name': 'a', 'index': 'x'}], 'mode': 'managed', 'type': 'aws_vpc', 'name': 'main',
             'index': None}
        """

        modules = [{"name": module.name, "index": _index_to_json(module.index)} for module in self.module_path]
        return {
            "module_path": modules,
            "mode": self.mode.value,
            "type": self.resource_spec.type,
            "name": self.resource_spec.name,
            "index": _index_to_json(self.resource_spec.index),
        }

    @staticmethod
    def from_json(data: dict[str, Any]) -> Address:
        module_path: Iterable[dict[str, Any]] = data["module_path"]
        return Address(
            module_path=ModulePath(Module(item["name"], Index.of(item["index"])) for item in module_path),
            resource_spec=ResourceSpec(data["type"], data["name"], Index.of(data["index"])),
            mode=ResourceMode(data["mode"]),
        )


def _index_to_json(index: Index) -> int | str | None:
    if isinstance(index, (IntegerIndex, TextIndex)):
        return index.value
    return None
