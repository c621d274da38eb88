"""Errors reported to the command line as fatal."""


class ContributorsError(Exception):
    """Base class for failures that stop a run."""


class TagNotFoundError(ContributorsError):
    def __init__(self, tag: str):
        super().__init__(f"Tag not found: {tag}")
        self.tag = tag


class NoTagsFoundError(ContributorsError):
    def __init__(self):
        super().__init__("No tags found in repository")


class NoOutputError(ContributorsError):
    def __init__(self):
        super().__init__("No output generated")
