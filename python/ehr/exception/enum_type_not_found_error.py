class EnumTypeNotFoundError(Exception):
    """
    Exception raised if a database enum type does not exist or has no values.
    """

    type_name: str

    def __init__(self, type_name: str):
        super().__init__(f"Enum type '{type_name}' not found in the database.")
        self.type_name = type_name
