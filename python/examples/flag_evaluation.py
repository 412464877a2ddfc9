"""Loading a stored configuration and watching individual flags."""

import logging

from flare_flags import ConfigStore, FlagView, FlareFlags, decode_config


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")

    # Any str -> str mapping works as the backing store.
    kv = {}
    store = ConfigStore(kv)

    print("1. Empty store yields the empty configuration:")
    print(f"   {store.get()}\n")

    store.put(decode_config({
        "cohorts": {"staff": [{"email_domain": "example.com"}]},
        "flags": {"adminPanel": [False, "__cohort__staff"]},
    }))
    print("2. Stored JSON:")
    print(f"   {kv['config']}\n")

    flags = FlareFlags({"adminPanel": False})
    store.load_into(flags)

    view = FlagView(flags, "adminPanel")
    view.watch(lambda value: print(f"   adminPanel is now {value}"))

    print("3. Identify staff member:")
    flags.identify("carol", {"email_domain": "example.com"})
    print()

    print("4. Identify external user:")
    flags.identify("dave", {"email_domain": "elsewhere.org"})
    print()


if __name__ == "__main__":
    main()
