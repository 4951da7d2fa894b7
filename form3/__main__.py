from form3.sample import main

if __name__ == "__main__":
    raise SystemExit(main())
