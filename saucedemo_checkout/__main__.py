from saucedemo_checkout.runner import run

if __name__ == "__main__":
    raise SystemExit(run())
