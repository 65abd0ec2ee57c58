"""create-web3-sdk: scaffold TypeScript Web3 SDK projects."""

__version__ = "1.3.2"
