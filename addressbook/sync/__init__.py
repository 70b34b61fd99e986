"""Synchronization — reconcile a local address book with a remote copy.

This package provides the primitives for:
- Codec: the reference ``name,phone,birthday`` string encoding
- Providers: the external capability that holds the remote state
- Synchronizer: the local-wins merge that rehydrates the address book
"""
