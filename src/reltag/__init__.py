"""Repository introspection and tagging for release automation.

Entry points:
- repository: RepositoryHandle, open_repository
- remote_url: parse_remote_url
- errors: exception taxonomy rooted at ReltagError
"""
