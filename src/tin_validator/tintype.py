from typing import Dict


class TinType:
    """
    Descriptor for one of the TIN schemes a country handler recognizes.
    It contains as fields:
      * code, a short identifier for the scheme (e.g. "DNI", "CPF")
      * name, a human-readable label
      * description, an optional free-text explanation
    """

    __slots__ = "code", "name", "description"

    def __init__(self, code: str, name: str, description: str = None):
        self.code = code
        self.name = name
        self.description = description

    def __repr__(self):
        return f"<TinType {self.code}:{self.name}>"

    def __eq__(self, other):
        if isinstance(other, dict):
            return self.to_json() == other
        if not isinstance(other, TinType):
            return NotImplemented
        return (
            self.code == other.code
            and self.name == other.name
            and self.description == other.description
        )

    def __hash__(self):
        return hash((self.code, self.name, self.description))

    def to_json(self) -> Dict:
        """
        Return the object data as a dict that can then be serialised as JSON
        """
        d = {"code": self.code, "name": self.name}
        if self.description is not None:
            d["description"] = self.description
        return d
