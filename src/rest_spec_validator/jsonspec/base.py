"""rest-api-spec data structures.

One JsonSpec per endpoint, as published in the rest-api-spec JSON files.
Only the url parts, params and body are used for validation; the rest is
kept so a spec file round-trips through the model.
"""

from pydantic import BaseModel


class UrlPath(BaseModel):
    """A single URL template and the path parts it exposes."""

    path: str = ""
    methods: list[str] = []
    parts: dict[str, dict] | None = None


class Url(BaseModel):
    paths: list[UrlPath]


class SpecBody(BaseModel):
    description: str = ""
    required: bool = False


class JsonSpec(BaseModel):
    """The json spec of a single endpoint."""

    documentation: dict = {}
    stability: str = ""
    url: Url
    params: dict[str, dict] | None = None
    body: SpecBody | None = None

    def url_parts(self) -> list[str]:
        """All distinct path part names across every URL template."""
        names: list[str] = []
        for url_path in self.url.paths:
            if url_path.parts is None:
                continue
            for name in url_path.parts:
                if name not in names:
                    names.append(name)
        return names
