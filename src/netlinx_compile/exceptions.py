class NetlinxCompileError(Exception):
    pass


class NoCompilerError(NetlinxCompileError):
    pass


class UnhandledExtensionError(NetlinxCompileError):
    pass
