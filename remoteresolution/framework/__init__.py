"""Resolver interfaces, configuration storage, a fake resolver and controller helpers."""