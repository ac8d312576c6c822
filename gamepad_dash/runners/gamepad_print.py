import pygame

from gamepad_dash import config
from gamepad_dash.controllers.gamepad import FixedInputSource
from gamepad_dash.controllers.pygame_source import PygameInputSource
from gamepad_dash.controllers.types import StickVector
from gamepad_dash.opmode.gamepad_opmode import GamepadOpMode
from gamepad_dash.opmode.runner import OpModeRunner
from gamepad_dash.telemetry.print_publisher import PrintOnlyPublisher


def main() -> None:
    print("Gamepad → dashboard JSON demo")
    print("Packets go to stdout. Ctrl+C to exit.\n")

    source = PygameInputSource.create(
        deadzone=config.CTRL_DEADZONE,
        layout=config.CTRL_LAYOUT,
        keyboard=config.KEYBOARD_PAD,
    )

    # Nothing to steer with: drift both dots so the output still changes.
    if not config.KEYBOARD_PAD and pygame.joystick.get_count() == 0:
        source = FixedInputSource(StickVector(0.5, 0.0), StickVector(0.0, -0.5))

    runner = OpModeRunner(GamepadOpMode(PrintOnlyPublisher()), source, hz=config.OPMODE_HZ)
    runner.run_forever()


if __name__ == "__main__":
    main()
