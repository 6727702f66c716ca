"""Black-box test helpers for the FakeRestAPI book/author catalog."""
