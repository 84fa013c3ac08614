"""Structural type inference from a JSON sample."""

import logging
import numbers
from collections import Counter
from typing import Any, Dict, Hashable, List, Optional, Sequence, Tuple

from .structure import validate_nesting_depth
from ..model.types import (
    CustomType,
    FieldSlot,
    FieldType,
    NameRegistry,
    PrimitiveKind,
    RecordType,
)
from ..naming.conventions import GENERIC, NamingConvention, get_naming_convention
from ..utils.exceptions import ConfigurationError, RootNotObjectError, TooDeepError

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 20
AUTO_RAISE_THRESHOLD = 20
AUTO_RAISE_MARGIN = 5
DEFAULT_MERGE_THRESHOLD = 0.5
# Nested record names are built from at most this many trailing key segments
NAME_PATH_SEGMENTS = 3

Path = Tuple[str, ...]
Inferred = Tuple[FieldType, List[RecordType], str]


def _json_type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, numbers.Number):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def classify_scalar(value: Any) -> PrimitiveKind:
    """
    Primitive kind of a non-object value.

    Empty objects, arrays and unknown values classify as Any.
    """
    if isinstance(value, bool):
        return PrimitiveKind.BOOLEAN
    if isinstance(value, numbers.Integral):
        return PrimitiveKind.INTEGER
    if isinstance(value, numbers.Real):
        return PrimitiveKind.NUMBER
    if isinstance(value, str):
        return PrimitiveKind.STRING
    return PrimitiveKind.ANY


def reconcile_kinds(kinds: Sequence[PrimitiveKind], widen: bool = True) -> Tuple[PrimitiveKind, str]:
    """
    Reduce observed primitive kinds to one kind.

    Args:
        kinds: One kind per observed value, in observation order
        widen: Apply array widening rules; when False any disagreement is Any

    Returns:
        (kind, annotation) where annotation lists the kinds seen if they
        could not be reconciled
    """
    if not kinds:
        return PrimitiveKind.ANY, ""

    distinct = list(dict.fromkeys(kinds))
    if len(distinct) == 1:
        return distinct[0], ""

    mixed = "Mixed types: " + ", ".join(str(kind) for kind in distinct)
    if not widen:
        return PrimitiveKind.ANY, mixed

    if PrimitiveKind.ANY in distinct or PrimitiveKind.STRING in distinct:
        return PrimitiveKind.ANY, mixed
    if PrimitiveKind.BOOLEAN in distinct:
        return PrimitiveKind.ANY, mixed
    if len(distinct) > 2:
        return PrimitiveKind.ANY, mixed
    if set(distinct) == {PrimitiveKind.INTEGER, PrimitiveKind.NUMBER}:
        return PrimitiveKind.NUMBER, ""

    # Most frequent kind; max() keeps the first-seen kind on ties
    counts = Counter(kinds)
    return max(distinct, key=lambda kind: counts[kind]), ""


def shape_signature(value: Any) -> Hashable:
    """Hashable description of a value's structure, used to count distinct object shapes."""
    if value is None:
        return "null"
    if isinstance(value, dict):
        return ("object", tuple(sorted((str(k), shape_signature(v)) for k, v in value.items())))
    if isinstance(value, list):
        return ("array", frozenset(shape_signature(e) for e in value))
    return classify_scalar(value)


class _InferenceRun:
    """State of one inference call: configuration plus its own name registry."""

    def __init__(self, convention: NamingConvention, max_depth: int, merge_threshold: float):
        self.convention = convention
        self.max_depth = max_depth
        self.merge_threshold = merge_threshold
        self.registry = NameRegistry()

    def infer_root(self, sample: Dict[str, Any], root_name: str) -> RecordType:
        return self._new_record([sample], root_name, (), 1)

    def _record_name(self, path: Path) -> str:
        return "_".join(path[-NAME_PATH_SEGMENTS:])

    def _new_record(
        self,
        objects: List[Dict[str, Any]],
        base_name: str,
        path: Path,
        depth: int,
        annotation: str = "",
    ) -> RecordType:
        if depth > self.max_depth:
            raise TooDeepError(depth, ".".join(path), self.max_depth)

        name = self.registry.allocate(self.convention.type_name(base_name))
        logger.debug(f"Allocated record '{name}' for path '{'.'.join(path) or '<root>'}' at depth {depth}")

        # JSON keys are strings; samples built in code may use other key types
        objects = [{str(key): value for key, value in obj.items()} for obj in objects]
        keys = sorted({key for obj in objects for key in obj})
        fields: List[FieldSlot] = []
        children: List[RecordType] = []

        for key in keys:
            occurrences = [obj[key] for obj in objects if key in obj]
            missing = len(occurrences) < len(objects)
            slot, introduced = self._build_field(key, occurrences, path + (key,), depth, missing)
            fields.append(slot)
            children.extend(introduced)

        return RecordType(name, tuple(fields), tuple(children), annotation)

    def _build_field(
        self,
        key: str,
        occurrences: List[Any],
        path: Path,
        depth: int,
        missing: bool,
    ) -> Tuple[FieldSlot, List[RecordType]]:
        """
        Build one field from every value observed under its key.

        A plain object contributes a single occurrence; a merged record
        contributes one per object that carried the key.
        """
        present = [value for value in occurrences if value is not None]
        is_optional = missing or len(present) < len(occurrences)
        arrays = [value for value in present if isinstance(value, list)]

        if arrays:
            is_array = True
            if any(element is None for array in arrays for element in array):
                is_optional = True
            if len(arrays) < len(present):
                field_type, introduced, annotation = (
                    PrimitiveKind.ANY, [], "Observed both array and non-array values"
                )
            else:
                elements = [e for array in arrays for e in array if e is not None]
                field_type, introduced, annotation = self._unify(elements, path, depth, widen=True)
        else:
            is_array = False
            field_type, introduced, annotation = self._unify(present, path, depth, widen=False)

        slot = FieldSlot(
            source_key=key,
            display_name=self.convention.field_name(key),
            type=field_type,
            is_array=is_array,
            is_optional=is_optional,
            annotation=annotation,
        )
        return slot, introduced

    def _unify(self, values: List[Any], path: Path, depth: int, widen: bool) -> Inferred:
        """
        Reduce non-null values to a single field type.

        Args:
            values: Array elements (widen=True) or the occurrences of one key
                across merged objects (widen=False)
            path: Key path of the field
            depth: Depth of the record that owns the field
            widen: Whether array widening rules apply to mixed primitives
        """
        if not values:
            return PrimitiveKind.ANY, [], ""

        objects = []
        kinds = []
        nested_arrays = False
        for value in values:
            if isinstance(value, dict) and value:
                objects.append(value)
            else:
                nested_arrays = nested_arrays or isinstance(value, list)
                kinds.append(classify_scalar(value))

        if objects and kinds:
            logger.debug(f"'{'.'.join(path)}' mixes objects and scalars, using Any")
            return PrimitiveKind.ANY, [], "Mixed object and non-object values"

        if objects:
            record = self._unify_objects(objects, path, depth)
            if record is None:
                return PrimitiveKind.ANY, [], "Object shapes too dissimilar to unify"
            return CustomType(record.name), [record], ""

        kind, annotation = reconcile_kinds(kinds, widen)
        if nested_arrays and not annotation:
            annotation = "Nested arrays are not represented; element type is Any"
        return kind, [], annotation

    def _unify_objects(self, objects: List[Dict[str, Any]], path: Path, depth: int) -> Optional[RecordType]:
        annotation = ""
        # A lone object has one shape; signatures walk the whole subtree
        shapes = {shape_signature(obj) for obj in objects} if len(objects) > 1 else set()

        if len(shapes) > 1:
            key_sets = [{str(key) for key in obj} for obj in objects]
            common = set.intersection(*key_sets)
            union = set.union(*key_sets)
            if not common or len(common) < self.merge_threshold * len(union):
                logger.debug(
                    f"'{'.'.join(path)}': {len(common)} of {len(union)} keys shared "
                    f"across {len(shapes)} shapes, not merging"
                )
                return None
            annotation = f"Unified from {len(objects)} objects with {len(shapes)} distinct shapes"
            logger.debug(f"'{'.'.join(path)}': {annotation.lower()}")

        return self._new_record(objects, self._record_name(path), path, depth + 1, annotation)


class StructureInferrer:
    """Infer a tree of record types from a JSON sample."""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize structure inferrer.

        Args:
            config: Inference configuration. Recognized keys:
                language: target language for naming (default "generic")
                max_depth: strict depth bound; None enables the default
                    bound with automatic raising for deep samples
                merge_threshold: fraction of keys that differently shaped
                    objects must share to be merged (default 0.5)
        """
        self.config = config or {}
        self.language = self.config.get('language') or GENERIC
        self.convention = get_naming_convention(self.language)
        self.max_depth = self.config.get('max_depth')
        self.merge_threshold = self.config.get('merge_threshold', DEFAULT_MERGE_THRESHOLD)

        if self.max_depth is not None and (
            isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int) or self.max_depth < 1
        ):
            raise ConfigurationError(f"max_depth must be a positive integer, got {self.max_depth!r}")
        if (
            isinstance(self.merge_threshold, bool)
            or not isinstance(self.merge_threshold, (int, float))
            or not 0 <= self.merge_threshold <= 1
        ):
            raise ConfigurationError(
                f"merge_threshold must be a number in [0, 1], got {self.merge_threshold!r}"
            )

    def effective_max_depth(self, scanned_depth: int) -> int:
        """
        Depth bound for a sample whose pre-scan measured scanned_depth.

        An explicit max_depth is used as-is. Otherwise the default bound is
        raised by a small margin for samples that are legitimately deep.
        """
        if self.max_depth is not None:
            return self.max_depth
        if scanned_depth >= AUTO_RAISE_THRESHOLD:
            raised = DEFAULT_MAX_DEPTH + AUTO_RAISE_MARGIN
            logger.info(f"Sample is {scanned_depth} levels deep, raising depth bound to {raised}")
            return raised
        return DEFAULT_MAX_DEPTH

    def infer(self, sample: Any, root_name: str = "Root") -> RecordType:
        """
        Infer the root record type of a sample.

        Args:
            sample: Parsed JSON value; must be an object
            root_name: Name for the root record (sanitized as a type name)

        Returns:
            Root RecordType with nested records attached

        Raises:
            RootNotObjectError: If the sample is not an object
            LikelyCircularError: If the pre-scan finds more than 100 levels
            TooDeepError: If nesting exceeds the depth bound
        """
        if not isinstance(sample, dict):
            raise RootNotObjectError(_json_type_name(sample))

        scanned_depth = validate_nesting_depth(sample)
        run = _InferenceRun(
            self.convention,
            self.effective_max_depth(scanned_depth),
            self.merge_threshold,
        )
        record = run.infer_root(sample, root_name)

        logger.info(
            f"Inferred {len(run.registry)} record type(s) for '{record.name}' "
            f"using {self.convention.language} naming",
            extra={'language': self.convention.language, 'root_name': record.name},
        )
        return record


def infer(
    sample: Any,
    root_name: str = "Root",
    language: str = GENERIC,
    max_depth: Optional[int] = None,
    merge_threshold: float = DEFAULT_MERGE_THRESHOLD,
) -> RecordType:
    """
    Convenience function to infer a type model.

    Args:
        sample: Parsed JSON object
        root_name: Name for the root record
        language: Target language whose naming convention is applied
        max_depth: Strict depth bound, or None for the default behavior
        merge_threshold: Key-sharing fraction required to merge object shapes

    Returns:
        Root RecordType
    """
    inferrer = StructureInferrer({
        'language': language,
        'max_depth': max_depth,
        'merge_threshold': merge_threshold,
    })
    return inferrer.infer(sample, root_name)
