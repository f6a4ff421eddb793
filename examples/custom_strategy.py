from dataclasses import dataclass

from aclx import AccessTuple, Ace, Acl, CallbackStrategy


@dataclass
class Door:
    id: str
    kind: str


def felix_never_closes(access: AccessTuple, data) -> bool:
    return access.principal == "felix" and access.action == "close" and access.securable.kind == "door"


def sally_always(access: AccessTuple, data) -> bool:
    return access.principal == "sally"


def main() -> None:
    acl = Acl()
    acl.add(Ace.of(CallbackStrategy(permits=sally_always, denies=felix_never_closes)))
    acl.add(Ace.permitting(action="close"))

    front = Door(id="front", kind="door")
    print(acl.permits(principals="felix", actions="close", securable=front))  # False
    print(acl.permits(principals="sally", actions="close", securable=front))  # True


if __name__ == "__main__":
    main()
