"""
Demonstration of the popup lifecycle

Press SPACE to show an alert; click OK to hide it. While the alert is
visible, clicks never reach the counter button underneath, and during the
exit animation every input is swallowed by the blocker.
"""
import logging
import pygame
from popups.core.event_listener import EventListener
from popups.core.node import Node
from popups.core.tween import TweenManager
from popups.ui.alert_popup import AlertPopup, AlertOptions
from popups.ui.settings import WIDTH, HEIGHT, BG_COLOR, BTN_CONFIRM_COLOR
from popups.ui.widgets import Button


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Popup demo")
    clock = pygame.time.Clock()
    tweens = TweenManager()
    listener = EventListener()

    clicks = {"count": 0}
    scene = Node('scene', size=(WIDTH, HEIGHT), position=(WIDTH / 2, HEIGHT / 2))
    counter = scene.add_child(Button('counter', (220, 60), BTN_CONFIRM_COLOR, text="Clicked 0"))

    def bump():
        clicks["count"] += 1
        counter.caption.set_text(f"Clicked {clicks['count']}")
    counter.on_click = bump

    alert = AlertPopup(tweens, event_listener=listener)
    listener.subscribe(lambda e: print(e), source=alert)
    alert.set_completion_callback(lambda: print("alert finished"))

    running = True
    while running:
        dt = clock.tick(60) / 1000.0
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                continue
            if alert.handle_event(event):
                continue
            if event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE and not alert.is_visible():
                alert.show(AlertOptions(title="Hello", message=f"You clicked {clicks['count']} times"))
                continue
            scene.handle_event(event)
        tweens.update(dt)
        screen.fill(BG_COLOR)
        scene.draw(screen)
        alert.draw(screen)
        pygame.display.flip()
    pygame.quit()


if __name__ == "__main__":
    main()
