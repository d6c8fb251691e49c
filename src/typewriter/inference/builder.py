from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable
from collections.abc import Set as AbstractSet
from dataclasses import dataclass
from itertools import combinations
from typing import Any

from typewriter.core.errors import RedefinitionError
from typewriter.core.types import UNDEFINED, Dialect, Kind
from typewriter.inference.models import ARRAY_ELEMENT, FieldRef, ShapeRecord, TypeModel
from typewriter.inference.naming import child_keypath, resolve_type_name
from typewriter.inference.options import AddOptions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Batch:
    number: int
    options: AddOptions


class TypeModelBuilder:
    """Infers a structural type model from example values.

    Each ``add_examples`` call is one batch. Batches merge into a working copy
    of the model that replaces the current one only when the whole batch
    succeeds, so a failed strict-mode batch leaves the model untouched.
    """

    def __init__(self):
        self._model = TypeModel()
        self._batch_count = 0

    @property
    def model(self) -> TypeModel:
        return self._model

    @property
    def batch_count(self) -> int:
        return self._batch_count

    def type_names(self) -> list[str]:
        return self._model.type_names()

    def add_examples(
        self,
        examples: Iterable[Any],
        options: AddOptions | None = None,
        **overrides: Any,
    ) -> str:
        """Merge a batch of examples into the model.

        Args:
            examples: Example values, each one a whole document.
            options: Naming and strictness options for this batch.
            **overrides: Individual ``AddOptions`` fields, applied on top.

        Returns:
            The type name of the root.

        Raises:
            RedefinitionError: In strict mode, when the batch would change a
                named type defined by an earlier batch.
        """
        options = options or AddOptions()
        if overrides:
            options = AddOptions(**{**options.model_dump(), **overrides})
        options = options.resolved()

        self._batch_count += 1
        batch = _Batch(number=self._batch_count, options=options)

        working = self._model.copy()
        root_name = self._storage_key("", batch)
        count = 0
        for example in examples:
            self._merge_example(working, "", example, batch)
            count += 1

        working.add_root(root_name)
        self._model = working
        logger.debug(f"Committed batch {batch.number}: {count} examples, root {root_name}")
        return root_name

    def _type_name(
        self,
        keypath: str,
        batch: _Batch,
        ancestors: tuple[str, ...] = (),
    ) -> str | None:
        options = batch.options
        name = resolve_type_name(
            keypath,
            options.named_keypaths,
            options.type_name_generator,
            options.root_type_name,
        )
        # A generated name that repeats an enclosing type would make tree data recursive.
        if name in ancestors and keypath not in options.named_keypaths:
            logger.debug(f"Generated name {name} for {keypath!r} repeats an enclosing type")
            return None
        return name

    def _storage_key(
        self,
        keypath: str,
        batch: _Batch,
        ancestors: tuple[str, ...] = (),
    ) -> str:
        return self._type_name(keypath, batch, ancestors) or keypath

    def _merge_example(
        self,
        model: TypeModel,
        keypath: str,
        value: Any,
        batch: _Batch,
        ancestors: tuple[str, ...] = (),
    ) -> str:
        name = self._type_name(keypath, batch, ancestors)
        key = name or keypath
        inner = ancestors + (key,)

        kind = Kind.of(value)
        paths: dict[str, FieldRef] = {}

        if kind is Kind.ARRAY:
            element_keypath = key + ARRAY_ELEMENT
            element = self._storage_key(element_keypath, batch, inner)
            if isinstance(value, AbstractSet):
                value = sorted(value, key=repr)
            for item in value:
                self._merge_example(model, element_keypath, item, batch, inner)
            paths[ARRAY_ELEMENT] = FieldRef(keypath=element)

        elif kind is Kind.OBJECT:
            if name and model.register_named_type(key, batch.number):
                logger.debug(f"Registered type {key} in batch {batch.number}")
            for member, member_value in value.items():
                member = str(member)
                child = self._merge_example(
                    model, child_keypath(key, member), member_value, batch, inner
                )
                paths[member] = FieldRef(
                    keypath=child,
                    required=member_value is not UNDEFINED,
                )

        existing = model.record(key, kind)
        if existing is None:
            model.set_record(key, kind, ShapeRecord(fields=paths))
        else:
            self._merge_fields(model, key, existing, paths, batch)
        return key

    def _merge_fields(
        self,
        model: TypeModel,
        key: str,
        existing: ShapeRecord,
        paths: dict[str, FieldRef],
        batch: _Batch,
    ) -> None:
        for name, ref in existing.fields.items():
            if ref.required and (name not in paths or not paths[name].required):
                self._check_redefinition(model, key, name, batch)
                ref.required = False

        for name, ref in paths.items():
            if name not in existing.fields:
                self._check_redefinition(model, key, name, batch)
                existing.fields[name] = FieldRef(keypath=ref.keypath, required=False)

    def _check_redefinition(
        self,
        model: TypeModel,
        key: str,
        field_name: str,
        batch: _Batch,
    ) -> None:
        defined_in = model.defining_batch(key)
        if defined_in is None or defined_in == batch.number:
            return

        if not batch.options.strict:
            logger.debug(
                f"Type {key} from batch {defined_in} redefined by batch "
                f"{batch.number} at field {field_name!r}"
            )
            return

        raise RedefinitionError(
            f"Type {key!r} defined in batch {defined_in} cannot be modified by "
            f"batch {batch.number}: field {field_name!r} would become optional",
            keypath=key,
            original_batch=defined_in,
            conflicting_batch=batch.number,
            field_name=field_name,
        )

    def find_similar_types(self) -> list[tuple[str, str]]:
        """Find named types with identical shapes.

        Shapes compare by kind set, field names and required flags; the child
        keypaths the fields point to are ignored.
        """
        groups: dict[frozenset, list[str]] = defaultdict(list)
        for name in self._model.type_names():
            signature = frozenset(
                (kind, record.signature())
                for kind, record in self._model.kinds(name).items()
            )
            groups[signature].append(name)

        pairs: list[tuple[str, str]] = []
        for names in groups.values():
            pairs.extend(combinations(names, 2))
        return pairs

    def generate(
        self,
        dialect: str | Dialect,
        inlined: bool = False,
        root: str | None = None,
        **format_options: Any,
    ) -> str:
        from typewriter.rendering import FormatOptions, RenderOptions, render

        options = RenderOptions(inlined=inlined, root=root)
        if format_options:
            options = options.model_copy(update={"format": FormatOptions(**format_options)})
        return render(self._model, dialect, options)
