class GherkinContextError(RuntimeError):
    pass


class StructuralMismatchError(GherkinContextError):
    """
    The live run and the indexed document disagree
    (e.g. the file was edited between parse and run).
    """


class FeatureUnavailableError(StructuralMismatchError):
    pass


class StepNotIndexedError(StructuralMismatchError):
    pass


class ExampleArityError(StructuralMismatchError):
    pass


class IdentifierAlreadySetError(GherkinContextError):
    pass
