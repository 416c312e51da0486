# renderer/preview.py
import numpy as np
import pygame

def show_image(image: np.ndarray, title: str = "Path Tracer") -> None:
    """
    Display an 8-bit (height, width, 3) image in a window until it is
    closed or Escape is pressed.
    """
    pygame.init()
    try:
        height, width = image.shape[0], image.shape[1]
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        # surfarray expects (width, height, 3)
        surface = pygame.surfarray.make_surface(np.ascontiguousarray(image.swapaxes(0, 1)))
        clock = pygame.time.Clock()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            screen.blit(surface, (0, 0))
            pygame.display.flip()
            clock.tick(30)
    finally:
        pygame.quit()
