"""Validates the type model against the rest-api-spec.

For every endpoint with a request type, the flattened request definition must
declare exactly the path and query parameters of the json spec, and must
declare a body when the spec requires one (and only when the spec has one).
Mismatches are reported as diagnostics; the model is returned unchanged.
"""

import logging
from collections.abc import Mapping

from rest_spec_validator.jsonspec.base import JsonSpec
from rest_spec_validator.model.base import BodyState, Endpoint, FlattenedProperties, Model
from rest_spec_validator.validator.diagnostics import Diagnostic, DiagnosticCategory, DiagnosticReport
from rest_spec_validator.validator.errors import SpecNotFound
from rest_spec_validator.validator.resolver import PropertyResolver

logger = logging.getLogger(__name__)


def reconcile(
    model: Model,
    json_spec: Mapping[str, JsonSpec | dict],
    diagnostics: DiagnosticReport | None = None,
    only: str | None = None,
) -> Model:
    """Compare every endpoint's request definition with its json spec.

    Diagnostics are published to ``diagnostics`` and to the module logger
    once the whole pass has completed. A fatal error (missing definition or
    json spec) aborts the pass and publishes nothing.

    ``only`` restricts the comparison to the request with that name; every
    request definition is still resolved.
    """
    resolver = PropertyResolver(model)
    found: list[Diagnostic] = []

    for endpoint in model.endpoints:
        if endpoint.request is None:
            continue
        definition = resolver.resolve(endpoint.request.name)
        if only is not None and endpoint.request.name != only:
            continue

        spec = json_spec.get(endpoint.name)
        if spec is None:
            raise SpecNotFound(endpoint.name)
        if isinstance(spec, dict):
            spec = JsonSpec.model_validate(spec)

        logger.debug("Reconciling %s (%s)", endpoint.name, endpoint.request.name)
        found.extend(compare_endpoint(endpoint, definition, spec))

    for diagnostic in found:
        logger.warning("%s", diagnostic.message)
    if diagnostics is not None:
        diagnostics.extend(found)

    return model


def compare_endpoint(endpoint: Endpoint, definition: FlattenedProperties, spec: JsonSpec) -> list[Diagnostic]:
    """Diff one flattened request definition against its json spec."""
    request = endpoint.request.name
    result = []

    result.extend(_compare_params(
        endpoint, "path", definition.path, spec.url_parts(),
        DiagnosticCategory.PATH_NOT_IN_SPEC, DiagnosticCategory.PATH_NOT_IN_MODEL,
    ))

    if spec.params is not None:
        result.extend(_compare_params(
            endpoint, "query", definition.query, list(spec.params),
            DiagnosticCategory.QUERY_NOT_IN_SPEC, DiagnosticCategory.QUERY_NOT_IN_MODEL,
        ))

    if definition.body == BodyState.YES_BODY and spec.body is None:
        result.append(Diagnostic(
            endpoint=endpoint.name,
            request=request,
            category=DiagnosticCategory.BODY_NOT_IN_SPEC,
            message=f"The {request} definition should not include a body",
        ))

    if definition.body == BodyState.NO_BODY and spec.body is not None and spec.body.required:
        result.append(Diagnostic(
            endpoint=endpoint.name,
            request=request,
            category=DiagnosticCategory.BODY_REQUIRED,
            message=f"The {request} definition should include a body",
        ))

    return result


def _compare_params(
    endpoint: Endpoint,
    location: str,
    model_names: list[str],
    spec_names: list[str],
    not_in_spec: DiagnosticCategory,
    not_in_model: DiagnosticCategory,
) -> list[Diagnostic]:
    request = endpoint.request.name
    result = []

    # are all the parameters in the request definition present in the json spec?
    for name in model_names:
        if name not in spec_names:
            result.append(Diagnostic(
                endpoint=endpoint.name,
                request=request,
                category=not_in_spec,
                name=name,
                message=(
                    f"The {request} definition has the {location} parameter {name} "
                    "which is not present in the json spec"
                ),
            ))

    # are all the parameters in the json spec present in the request definition?
    for name in spec_names:
        if name not in model_names:
            result.append(Diagnostic(
                endpoint=endpoint.name,
                request=request,
                category=not_in_model,
                name=name,
                message=(
                    f"The {request} definition does not include the {location} parameter {name} "
                    "which is present in the json spec"
                ),
            ))

    return result
