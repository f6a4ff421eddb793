from aclx import Acl, PrimitiveAction


def main() -> None:
    acl = Acl()
    acl.permit(principal="alice", securable="doc:42", action=PrimitiveAction.READ)
    acl.permit(principal="bob", securable="doc:42", action=PrimitiveAction.UPDATE)
    acl.deny(principal="mallory", action=PrimitiveAction.READ)

    # alice and bob together cover both actions
    print(
        acl.permits(
            principals=["alice", "bob"],
            actions=[PrimitiveAction.READ, PrimitiveAction.UPDATE],
            securable="doc:42",
        )
    )  # True

    # mallory's denial vetoes the whole group
    print(
        acl.permits(
            principals=["alice", "mallory"],
            actions=PrimitiveAction.READ,
            securable="doc:42",
        )
    )  # False


if __name__ == "__main__":
    main()
