def uuid_without_hyphen(uid: str) -> str:
    """
    Get the compact form of a UUID, that is, the UUID without its hyphens.
    """

    return uid.replace('-', '')


def uuid_variants(uid: str) -> list[str]:
    """
    Get the distinct forms under which a UUID may be stored in the database, that is, the UUID as
    given and its form without hyphens.
    """

    compact_uid = uuid_without_hyphen(uid)
    if compact_uid == uid:
        return [uid]

    return [uid, compact_uid]
