"""Category tree: store, node identity, mutations and the tree row walk."""
