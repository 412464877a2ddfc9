"""Basic usage examples for flare_flags."""

from flare_flags import FlareFlags


def main():
    flags = FlareFlags({"newCheckout": False, "darkMode": True, "betaBanner": False})

    print("=== Defaults ===\n")
    for name in ("newCheckout", "darkMode", "betaBanner", "unknown"):
        print(f"   {name}: {flags.is_enabled(name)}")
    print()

    unsubscribe = flags.subscribe(lambda: print(f"   -> flags changed: {flags.snapshot()}"))

    print("=== Apply configuration ===\n")
    flags.set_config({
        "cohorts": {
            "beta": ["alice", {"plan": "enterprise"}],
        },
        "flags": {
            "newCheckout": [False, "__cohort__beta"],
            "betaBanner": [False, "__cohort__beta", {"country": "NZ"}],
            "darkMode": [True],
        },
    })
    print()

    print("=== Identify a user in the beta cohort ===\n")
    flags.identify("alice")
    print(f"   newCheckout: {flags.is_enabled('newCheckout')}\n")

    print("=== Identify a user matched by property ===\n")
    flags.identify("bob", {"country": "NZ", "plan": "free"})
    print(f"   newCheckout: {flags.is_enabled('newCheckout')}")
    print(f"   betaBanner: {flags.is_enabled('betaBanner')}\n")

    print("=== Reset (logout) ===\n")
    flags.reset()
    print(f"   snapshot: {flags.snapshot()}\n")

    unsubscribe()


if __name__ == "__main__":
    main()
