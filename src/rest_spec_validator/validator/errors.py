"""Fatal errors raised while reconciling the model with the json spec."""


class ReconcileError(Exception):
    """Base class for errors that abort a reconciliation pass."""


class DefinitionNotFound(ReconcileError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Can't find the request definition for {name}")


class SpecNotFound(ReconcileError):
    def __init__(self, endpoint: str):
        self.endpoint = endpoint
        super().__init__(f"Can't find the json spec for {endpoint}")


class CyclicInheritance(ReconcileError):
    def __init__(self, chain: list[str]):
        self.chain = chain
        super().__init__(f"Cyclic inheritance: {' -> '.join(chain)}")
