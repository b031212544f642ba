from taproom import Bartender, Roster, TaproomSettings, configure_logging


def main() -> None:
    settings = TaproomSettings(log_level="DEBUG")
    configure_logging(settings)

    roster = Roster(settings)
    phil = Bartender("Phil", roster)
    roster.hire("Nancy")

    print(phil.intro())
    print(phil.make_drink())
    print(roster.list_all())


if __name__ == "__main__":
    main()
