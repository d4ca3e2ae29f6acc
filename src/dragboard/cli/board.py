"""Handlers for 'dragboard summary' and 'dragboard move'."""

from dragboard.cli._common import build_group_summaries, error, load_board_or_die, output_json, parse_position
from dragboard.drag import CardDragManager
from dragboard.model.board import BoardController


def _print_summary(board: BoardController) -> None:
    for g in build_group_summaries(board):
        count = len(g["items"])
        items = "item" if count == 1 else "items"
        locked = "  (locked)" if not g["draggable"] else ""
        print(f"  {g['id']}  {g['name']:<16} {count} {items}{locked}")
        for item_id in g["items"]:
            print(f"      {item_id}")


def board_summary(args) -> int:
    """Show groups and their items in order."""
    board = load_board_or_die(args.file, args.json)

    if args.json:
        output_json({"groups": build_group_summaries(board)})
    else:
        _print_summary(board)

    return 0


def board_move(args) -> int:
    """Replay a drag of one item and show the resulting board. The file is not modified."""
    from_group, from_index = parse_position(args.source, args.json)
    to_group, to_index = parse_position(args.target, args.json)

    moves: list[dict] = []

    def on_move_item(group_id, from_idx, to_idx):
        moves.append({"from": [group_id, from_idx], "to": [group_id, to_idx]})

    def on_move_to_group(from_group_id, from_idx, to_group_id, to_idx):
        moves.append({"from": [from_group_id, from_idx], "to": [to_group_id, to_idx]})

    board = load_board_or_die(
        args.file,
        args.json,
        on_move_group_item=on_move_item,
        on_move_group_item_to_group=on_move_to_group,
    )
    if from_group not in board or to_group not in board:
        missing = from_group if from_group not in board else to_group
        error(f"Group '{missing}' not found. Available: {', '.join(board.group_ids)}", args.json)

    manager = CardDragManager(board)
    if not manager.start(from_group, from_index):
        error(f"cannot pick up item {from_index} of group '{from_group}'", args.json)
    manager.update_position(to_group, to_index)
    manager.finish()

    if args.json:
        output_json({"moves": moves, "groups": build_group_summaries(board)})
    else:
        for move in moves:
            print(f"moved {move['from'][0]}:{move['from'][1]} -> {move['to'][0]}:{move['to'][1]}")
        if not moves:
            print("nothing moved")
        _print_summary(board)

    return 0
