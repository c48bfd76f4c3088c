"""Structural diff between two API specification documents."""

from collections.abc import Mapping
from typing import Any

from spec_bridge.diff.models import DifferenceType, DiffSummary, Impact, SpecDifference
from spec_bridge.spec.document import (
    COMPONENT_TYPES,
    HTTP_METHODS,
    INFO_FIELDS,
    as_mapping,
    child,
    ensure_document,
    get_components,
    get_info,
    get_operation,
    get_parameters,
    get_paths,
    get_response,
    get_servers,
    ordered_union,
    parameter_type,
)
from spec_bridge.utils.logging import get_logger

logger = get_logger(__name__)

# Deep equality cannot tell how much a component change matters to clients
COMPONENT_MODIFIED_CONFIDENCE = 0.8


class SpecDiffEngine:
    """Compare an old and a new specification document.

    The engine is stateless: every call walks both documents from scratch
    and returns a fresh, deterministically ordered list of differences.
    """

    def calculate_differences(
        self, old_spec: Mapping[str, Any], new_spec: Mapping[str, Any]
    ) -> list[SpecDifference]:
        """Calculate the classified differences between two documents.

        Differences are emitted for paths first, then components, info and
        servers.

        Args:
            old_spec: The legacy API document
            new_spec: The replacement API document

        Returns:
            Ordered list of differences

        Raises:
            MalformedSpecError: If either document is not a mapping
        """
        ensure_document(old_spec, "old")
        ensure_document(new_spec, "new")

        differences: list[SpecDifference] = []

        self._compare_paths(get_paths(old_spec), get_paths(new_spec), differences)
        self._compare_components(
            get_components(old_spec), get_components(new_spec), differences
        )
        self._compare_info(get_info(old_spec), get_info(new_spec), differences)
        self._compare_servers(get_servers(old_spec), get_servers(new_spec), differences)

        logger.info("differences_calculated", count=len(differences))

        return differences

    def generate_summary(self, differences: list[SpecDifference]) -> DiffSummary:
        """Count differences by type and by impact.

        Args:
            differences: Differences from calculate_differences()

        Returns:
            DiffSummary with total, per-type and per-impact counts
        """
        by_type = {diff_type: 0 for diff_type in DifferenceType}
        by_impact = {impact: 0 for impact in Impact}

        for diff in differences:
            by_type[diff.type] += 1
            by_impact[diff.impact] += 1

        return DiffSummary(
            total_differences=len(differences),
            added_count=by_type[DifferenceType.ADDED],
            removed_count=by_type[DifferenceType.REMOVED],
            modified_count=by_type[DifferenceType.MODIFIED],
            breaking_changes=by_impact[Impact.BREAKING],
            non_breaking_changes=by_impact[Impact.NON_BREAKING],
            enhancements=by_impact[Impact.ENHANCEMENT],
        )

    def _compare_paths(
        self,
        paths1: Mapping[str, Any],
        paths2: Mapping[str, Any],
        differences: list[SpecDifference],
    ) -> None:
        for path in ordered_union(paths1, paths2):
            path_item1 = paths1.get(path)
            path_item2 = paths2.get(path)

            if path_item1 is None and path_item2 is not None:
                differences.append(
                    SpecDifference(
                        type=DifferenceType.ADDED,
                        path=f"paths.{path}",
                        new_value=path_item2,
                        description=f"New endpoint added: {path}",
                        impact=Impact.ENHANCEMENT,
                    )
                )
            elif path_item1 is not None and path_item2 is None:
                differences.append(
                    SpecDifference(
                        type=DifferenceType.REMOVED,
                        path=f"paths.{path}",
                        old_value=path_item1,
                        description=f"Endpoint removed: {path}",
                        impact=Impact.BREAKING,
                    )
                )
            elif path_item1 is not None and path_item2 is not None:
                self._compare_methods(path_item1, path_item2, f"paths.{path}", differences)

    def _compare_methods(
        self,
        path_item1: Any,
        path_item2: Any,
        base_path: str,
        differences: list[SpecDifference],
    ) -> None:
        for method in HTTP_METHODS:
            operation1 = get_operation(path_item1, method)
            operation2 = get_operation(path_item2, method)

            if operation1 is None and operation2 is not None:
                differences.append(
                    SpecDifference(
                        type=DifferenceType.ADDED,
                        path=f"{base_path}.{method}",
                        new_value=operation2,
                        description=f"New {method.upper()} method added",
                        impact=Impact.ENHANCEMENT,
                    )
                )
            elif operation1 is not None and operation2 is None:
                differences.append(
                    SpecDifference(
                        type=DifferenceType.REMOVED,
                        path=f"{base_path}.{method}",
                        old_value=operation1,
                        description=f"{method.upper()} method removed",
                        impact=Impact.BREAKING,
                    )
                )
            elif operation1 is not None and operation2 is not None:
                self._compare_operation(
                    operation1, operation2, f"{base_path}.{method}", differences
                )

    def _compare_operation(
        self,
        operation1: Mapping[str, Any],
        operation2: Mapping[str, Any],
        base_path: str,
        differences: list[SpecDifference],
    ) -> None:
        self._compare_parameters(
            get_parameters(operation1),
            get_parameters(operation2),
            f"{base_path}.parameters",
            differences,
        )

        body1 = operation1.get("requestBody")
        body2 = operation2.get("requestBody")
        if body1 is not None or body2 is not None:
            self._compare_request_body(body1, body2, f"{base_path}.requestBody", differences)

        self._compare_responses(
            child(operation1, "responses"),
            child(operation2, "responses"),
            f"{base_path}.responses",
            differences,
        )

        if operation1.get("summary") != operation2.get("summary"):
            differences.append(
                SpecDifference(
                    type=DifferenceType.MODIFIED,
                    path=f"{base_path}.summary",
                    old_value=operation1.get("summary"),
                    new_value=operation2.get("summary"),
                    description="Method summary changed",
                    impact=Impact.NON_BREAKING,
                )
            )

    def _compare_parameters(
        self,
        params1: list[Mapping[str, Any]],
        params2: list[Mapping[str, Any]],
        base_path: str,
        differences: list[SpecDifference],
    ) -> None:
        # Parameters are identified by name and location together
        param_map1 = {(p.get("name"), p.get("in")): p for p in params1}
        param_map2 = {(p.get("name"), p.get("in")): p for p in params2}

        for key, param in param_map2.items():
            if key not in param_map1:
                required = bool(param.get("required", False))
                differences.append(
                    SpecDifference(
                        type=DifferenceType.ADDED,
                        path=f"{base_path}.{param.get('name')}",
                        new_value=param,
                        description=f"New {param.get('in')} parameter '{param.get('name')}' added",
                        impact=Impact.BREAKING if required else Impact.NON_BREAKING,
                    )
                )

        for key, param in param_map1.items():
            if key not in param_map2:
                differences.append(
                    SpecDifference(
                        type=DifferenceType.REMOVED,
                        path=f"{base_path}.{param.get('name')}",
                        old_value=param,
                        description=f"Parameter '{param.get('name')}' removed",
                        impact=Impact.BREAKING,
                    )
                )

        for key, param1 in param_map1.items():
            param2 = param_map2.get(key)
            if param2 is None:
                continue

            name = param1.get("name")
            required1 = bool(param1.get("required", False))
            required2 = bool(param2.get("required", False))
            if required1 != required2:
                differences.append(
                    SpecDifference(
                        type=DifferenceType.MODIFIED,
                        path=f"{base_path}.{name}.required",
                        old_value=required1,
                        new_value=required2,
                        description=f"Parameter '{name}' required status changed",
                        impact=Impact.BREAKING if required2 else Impact.NON_BREAKING,
                    )
                )

            type1 = parameter_type(param1)
            type2 = parameter_type(param2)
            if type1 != type2:
                differences.append(
                    SpecDifference(
                        type=DifferenceType.MODIFIED,
                        path=f"{base_path}.{name}.type",
                        old_value=type1,
                        new_value=type2,
                        description=f"Parameter '{name}' type changed",
                        impact=Impact.BREAKING,
                    )
                )

    def _compare_request_body(
        self,
        body1: Any,
        body2: Any,
        base_path: str,
        differences: list[SpecDifference],
    ) -> None:
        if body1 is None and body2 is not None:
            differences.append(
                SpecDifference(
                    type=DifferenceType.ADDED,
                    path=base_path,
                    new_value=body2,
                    description="Request body added",
                    impact=Impact.BREAKING,
                )
            )
        elif body1 is not None and body2 is None:
            differences.append(
                SpecDifference(
                    type=DifferenceType.REMOVED,
                    path=base_path,
                    old_value=body1,
                    description="Request body removed",
                    impact=Impact.BREAKING,
                )
            )
        else:
            required1 = bool(as_mapping(body1).get("required", False))
            required2 = bool(as_mapping(body2).get("required", False))
            if required1 != required2:
                differences.append(
                    SpecDifference(
                        type=DifferenceType.MODIFIED,
                        path=f"{base_path}.required",
                        old_value=required1,
                        new_value=required2,
                        description="Request body required status changed",
                        impact=Impact.BREAKING if required2 else Impact.NON_BREAKING,
                    )
                )

    def _compare_responses(
        self,
        responses1: Mapping[Any, Any],
        responses2: Mapping[Any, Any],
        base_path: str,
        differences: list[SpecDifference],
    ) -> None:
        # Only status-code presence is compared; response bodies are field-mapped instead.
        # YAML reads unquoted codes as integers, so codes are compared as strings.
        codes1 = [str(code) for code in responses1]
        codes2 = [str(code) for code in responses2]
        for code in ordered_union(codes1, codes2):
            response1 = get_response(responses1, code)
            response2 = get_response(responses2, code)

            if response1 is None and response2 is not None:
                differences.append(
                    SpecDifference(
                        type=DifferenceType.ADDED,
                        path=f"{base_path}.{code}",
                        new_value=response2,
                        description=f"New response code {code} added",
                        impact=Impact.ENHANCEMENT,
                    )
                )
            elif response1 is not None and response2 is None:
                differences.append(
                    SpecDifference(
                        type=DifferenceType.REMOVED,
                        path=f"{base_path}.{code}",
                        old_value=response1,
                        description=f"Response code {code} removed",
                        impact=Impact.BREAKING,
                    )
                )

    def _compare_components(
        self,
        components1: Mapping[str, Any],
        components2: Mapping[str, Any],
        differences: list[SpecDifference],
    ) -> None:
        for component_type in COMPONENT_TYPES:
            self._compare_component_type(
                child(components1, component_type),
                child(components2, component_type),
                f"components.{component_type}",
                differences,
            )

    def _compare_component_type(
        self,
        items1: Mapping[str, Any],
        items2: Mapping[str, Any],
        base_path: str,
        differences: list[SpecDifference],
    ) -> None:
        for key in ordered_union(items1, items2):
            item1 = items1.get(key)
            item2 = items2.get(key)

            if item1 is None and item2 is not None:
                differences.append(
                    SpecDifference(
                        type=DifferenceType.ADDED,
                        path=f"{base_path}.{key}",
                        new_value=item2,
                        description=f"New component '{key}' added",
                        impact=Impact.ENHANCEMENT,
                    )
                )
            elif item1 is not None and item2 is None:
                differences.append(
                    SpecDifference(
                        type=DifferenceType.REMOVED,
                        path=f"{base_path}.{key}",
                        old_value=item1,
                        description=f"Component '{key}' removed",
                        impact=Impact.BREAKING,
                    )
                )
            elif item1 != item2:
                differences.append(
                    SpecDifference(
                        type=DifferenceType.MODIFIED,
                        path=f"{base_path}.{key}",
                        old_value=item1,
                        new_value=item2,
                        description=f"Component '{key}' modified",
                        impact=Impact.BREAKING,
                        confidence=COMPONENT_MODIFIED_CONFIDENCE,
                    )
                )

    def _compare_info(
        self,
        info1: Mapping[str, Any],
        info2: Mapping[str, Any],
        differences: list[SpecDifference],
    ) -> None:
        for field_name in INFO_FIELDS:
            if info1.get(field_name) != info2.get(field_name):
                differences.append(
                    SpecDifference(
                        type=DifferenceType.MODIFIED,
                        path=f"info.{field_name}",
                        old_value=info1.get(field_name),
                        new_value=info2.get(field_name),
                        description=f"API {field_name} changed",
                        impact=Impact.NON_BREAKING,
                    )
                )

    def _compare_servers(
        self,
        servers1: list[Any],
        servers2: list[Any],
        differences: list[SpecDifference],
    ) -> None:
        # Only the number of servers is compared
        if len(servers1) != len(servers2):
            differences.append(
                SpecDifference(
                    type=DifferenceType.MODIFIED,
                    path="servers",
                    old_value=servers1,
                    new_value=servers2,
                    description="Server configuration changed",
                    impact=Impact.BREAKING,
                )
            )
