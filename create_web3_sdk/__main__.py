from create_web3_sdk.cli import main

if __name__ == "__main__":
    main()
