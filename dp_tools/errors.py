class DPError(Exception):
    pass


class UnknownSymbolError(DPError, KeyError):
    def __init__(self, symbol):
        self.symbol = symbol
        super().__init__(symbol)

    def __str__(self):
        return f"Symbol {self.symbol!r} has no entry in the weight table"


class InvalidConfigurationError(DPError, ValueError):
    pass


class ComputationCancelled(DPError):
    pass
