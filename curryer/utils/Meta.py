def reconcile_meta(*classes):
    # keep only the most derived metaclasses, in first-seen order
    metaclasses = []
    for mcls in map(type, classes):
        if any(issubclass(known, mcls) for known in metaclasses):
            continue
        metaclasses = [known for known in metaclasses if not issubclass(mcls, known)]
        metaclasses.append(mcls)
    metaclass = metaclasses[0] if len(metaclasses) == 1 \
        else type("_".join(mcls.__name__ for mcls in metaclasses), tuple(metaclasses), {})
    return metaclass("_".join(cls.__name__ for cls in classes), classes, {})
