def id_to_label(id: str) -> str:
    """
    Convert a database identifier to a human readable label, that is, replace the underscores by
    spaces and capitalize the first letter of each word (`last_meal_types` -> `Last Meal Types`).
    """

    words = id.replace('_', ' ').split(' ')
    return ' '.join(word[:1].upper() + word[1:] for word in words)
