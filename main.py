import logging
import os
import random

from opponent_engine import DEFAULT_CATALOG, GameSession, PersonaNotFound

# -----------------------------
#   Persona Chess - Main Entry
# -----------------------------
# Terminal front end: pick an opponent, then play White against it.


def choose_persona(catalog=DEFAULT_CATALOG):
    personas = catalog.list()
    for i, persona in enumerate(personas, start=1):
        print(f"  {i}. {persona.display_name} - {persona.description} "
              f"(skill {persona.difficulty_level}/10)")
    while True:
        choice = input("Choose your opponent: ").strip()
        if choice.isdigit() and 1 <= int(choice) <= len(personas):
            return personas[int(choice) - 1]
        try:
            return catalog.by_name(choice)
        except PersonaNotFound as e:
            print(e)


def play(session):
    name = session.persona.display_name
    print(session.greeting())
    while True:
        print()
        print(session.board.unicode(invert_color=True, borders=True))
        if session.is_over():
            prompt = "Game over. Type 'new', 'undo' or 'quit': "
        else:
            prompt = "Your move (SAN or UCI; 'undo', 'new', 'quit'): "
        text = input(prompt).strip()
        command = text.lower()

        if command in ("quit", "exit"):
            print(f"{name}: Leaving already? See you next time!")
            return
        if command == "new":
            print(session.new_game())
            continue
        if command == "undo":
            print(session.undo()["message"])
            continue
        if session.is_over():
            continue

        result = session.player_move(text)
        if not result["success"]:
            print(result["message"])
            continue
        print(f"{name}: {result['reaction']}")
        if result["status"]:
            print(result["status"])
        if "final" in result:
            print(f"{name}: {result['final']}")
            continue

        reply = session.engine_move()
        print(reply["message"])
        print(f"{name}: {reply['comment']}")
        if reply["status"]:
            print(reply["status"])
        if "final" in reply:
            print(f"{name}: {reply['final']}")


def main():
    level = logging.DEBUG if os.environ.get("PERSONA_CHESS_DEBUG") else logging.WARNING
    logging.basicConfig(level=level, format="[%(levelname)s] %(name)s: %(message)s")

    seed = os.environ.get("PERSONA_CHESS_SEED")
    rng = random.Random(int(seed)) if seed else random.Random()

    persona = choose_persona()
    play(GameSession(persona, rng=rng))


if __name__ == "__main__":
    main()
